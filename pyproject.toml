[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "submarine_puzzles"
version = "1.0.0"
description = "Solvers for a season of submarine-themed programming puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "algorithms"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
amphipod = "submarine_puzzles.amphipod:main"
arithmetic-logic-unit = "submarine_puzzles.arithmetic_logic_unit:main"
beacon-scanner = "submarine_puzzles.beacon_scanner:main"
binary-diagnostic = "submarine_puzzles.binary_diagnostic:main"
chiton = "submarine_puzzles.chiton:main"
dirac-dice = "submarine_puzzles.dirac_dice:main"
dive = "submarine_puzzles.dive:main"
dumbo-octopus = "submarine_puzzles.dumbo_octopus:main"
extended-polymerization = "submarine_puzzles.extended_polymerization:main"
giant-squid = "submarine_puzzles.giant_squid:main"
hydrothermal-venture = "submarine_puzzles.hydrothermal_venture:main"
lanternfish = "submarine_puzzles.lanternfish:main"
packet-decoder = "submarine_puzzles.packet_decoder:main"
passage-pathing = "submarine_puzzles.passage_pathing:main"
reactor-reboot = "submarine_puzzles.reactor_reboot:main"
sea-cucumber = "submarine_puzzles.sea_cucumber:main"
seven-segment = "submarine_puzzles.seven_segment:main"
smoke-basin = "submarine_puzzles.smoke_basin:main"
snailfish = "submarine_puzzles.snailfish:main"
sonar-sweep = "submarine_puzzles.sonar_sweep:main"
syntax-scoring = "submarine_puzzles.syntax_scoring:main"
transparent-origami = "submarine_puzzles.transparent_origami:main"
treachery-whales = "submarine_puzzles.treachery_whales:main"
trench-map = "submarine_puzzles.trench_map:main"
trick-shot = "submarine_puzzles.trick_shot:main"

[tool.hatch.build.targets.wheel]
packages = ["submarine_puzzles"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
