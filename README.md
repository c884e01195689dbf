# submarine_puzzles

Solvers for a season of submarine-themed programming puzzles: sonar
readings, bingo with a giant squid, lanternfish populations, packet
decoding, snailfish arithmetic, amphipod sorting and more. Each puzzle
lives in its own module and can be used as a library or run as a
command. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Commands

Every puzzle has a command of the same name. Commands that work on a
puzzle input read it from a file named as the argument, or from
standard input when no file is given, and print their answers:

```
binary-diagnostic input.txt
giant-squid < input.txt
lanternfish < input.txt
packet-decoder < input.txt
snailfish < input.txt
```

Some commands take extra arguments or options:

- `sonar-sweep PART [FILE]` needs the part to run, `1` or `2`:
  `sonar-sweep 1 < input.txt`.
- `lanternfish --days N` sets the number of days to simulate (256 by
  default).
- `treachery-whales --part1` uses the constant fuel rate; by default each
  further step costs one more unit of fuel.
- `beacon-scanner --puzzle-order` aligns scanners in a fixed order worked
  out for one particular puzzle input (it needs at least 39 scanners);
  without it, every pair of scanners is tried.

Several commands print only the second part of their puzzle:
`binary-diagnostic` (life-support rating), `dive` (with aim),
`giant-squid` (last winning board) and `hydrothermal-venture` (all
lines, diagonals included). The first parts are available as library
functions.

A few puzzles have their input built in:

```
amphipod
arithmetic-logic-unit
dirac-dice [POS1 POS2]
trick-shot [X1 X2 Y1 Y2]
```

`amphipod` solves a fixed four-deep burrow, and
`arithmetic-logic-unit` checks two fixed model numbers, printing the
value of `z` in base 26 after each block. `dirac-dice` takes the two
starting positions (10 and 3 by default) and `trick-shot` the bounds of
the target area (119 176 -141 -84 by default).

The full list of commands:

| Command | Puzzle |
| --- | --- |
| `sonar-sweep` | counting increases in depth measurements |
| `dive` | steering the submarine |
| `binary-diagnostic` | power consumption and life-support ratings |
| `giant-squid` | first and last winning bingo boards |
| `hydrothermal-venture` | overlapping vent lines |
| `lanternfish` | exponential fish growth |
| `treachery-whales` | aligning crab submarines for least fuel |
| `seven-segment` | decoding scrambled displays |
| `smoke-basin` | low points and basins in a height map |
| `syntax-scoring` | corrupted and incomplete bracket lines |
| `dumbo-octopus` | flashing octopus grid |
| `passage-pathing` | counting paths through caves |
| `transparent-origami` | folding dotted paper |
| `extended-polymerization` | pair insertion polymers |
| `chiton` | lowest-risk path through the five-fold enlarged grid |
| `packet-decoder` | nested transmission packets |
| `trick-shot` | probe launch velocities |
| `snailfish` | snailfish number addition and magnitude |
| `beacon-scanner` | aligning scanners and counting beacons |
| `trench-map` | image enhancement |
| `dirac-dice` | deterministic and quantum dice games |
| `reactor-reboot` | counting lit cubes |
| `amphipod` | least energy to sort amphipods |
| `arithmetic-logic-unit` | checking model numbers |
| `sea-cucumber` | steps until the herds stop moving |

## Library use

The modules can be imported directly. Malformed input raises
`ValueError`. For example:

```python
from submarine_puzzles.sonar_sweep import sonar_sweep_one
from submarine_puzzles.snailfish import SnailNum, maximal_magnitude
from submarine_puzzles.packet_decoder import decode
from submarine_puzzles.dive import parse_commands, dive_one

print(sonar_sweep_one([199, 200, 208, 210, 200]))
print(SnailNum("[[1,2],[[3,4],5]]").magnitude())
print((SnailNum("[1,2]") + SnailNum("[[3,4],5]")).magnitude())
print(decode("D2FE28").value())
print(dive_one(parse_commands("forward 5\ndown 5\nforward 8")))
```

## What the package does not do

The puzzle inputs are not fetched or stored; each command works only on
the input it is given or on its built-in values. The amphipod solver
handles burrows of any room depth through `Position`, but its command
always solves the built-in four-deep burrow, and the
arithmetic-logic-unit module checks model numbers rather than searching
for them.