"""Polymer pair insertion, tracked by counting adjacent pairs."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from dataclasses import dataclass, field

_RULE = re.compile(r"^\s*(\S)(\S)\s*->\s*(\S)\s*$")


@dataclass
class InsertionRules:
    """Pair insertion rules and every element they mention, in first-seen order."""

    rules: dict[tuple[str, str], str] = field(default_factory=dict)
    elements: list[str] = field(default_factory=list)

    def add_rule(self, rule: str) -> None:
        """Add a rule written as ``AB -> C``."""
        match = _RULE.match(rule)
        if match is None:
            raise ValueError(f"invalid insertion rule {rule!r}")
        first, second, inserted = match.groups()
        self.rules.setdefault((first, second), inserted)
        for element in (first, second, inserted):
            if element not in self.elements:
                self.elements.append(element)


class Polymer:
    """A polymer stored as counts of adjacent pairs plus its two end elements."""

    def __init__(self, template: str, rules: InsertionRules) -> None:
        template = template.strip()
        if not template:
            raise ValueError("the polymer template is empty")
        unknown = set(template) - set(rules.elements)
        if unknown:
            raise ValueError(f"elements not covered by the rules: {''.join(sorted(unknown))}")
        self._elements = list(rules.elements)
        self.front = template[0]
        self.back = template[-1]
        self.pairs: Counter[tuple[str, str]] = Counter(zip(template, template[1:]))

    def polymerize(self, rules: InsertionRules) -> None:
        """Apply one step of pair insertion; pairs without a rule carry over."""
        result: Counter[tuple[str, str]] = Counter()
        for pair, count in self.pairs.items():
            inserted = rules.rules.get(pair)
            if inserted is None:
                result[pair] += count
            else:
                result[(pair[0], inserted)] += count
                result[(inserted, pair[1])] += count
        self.pairs = result

    def element_counts(self) -> dict[str, int]:
        """How often each known element occurs, including those that do not occur at all."""
        doubled = dict.fromkeys(self._elements, 0)
        for (first, second), count in self.pairs.items():
            doubled[first] += count
            doubled[second] += count
        doubled[self.front] += 1
        doubled[self.back] += 1
        return {element: count // 2 for element, count in doubled.items()}

    def element_spread(self) -> int:
        """Count of the most common element minus that of the least common."""
        counts = self.element_counts().values()
        return max(counts) - min(counts)


def parse_input(text: str) -> tuple[str, InsertionRules]:
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise ValueError("missing polymer template")
    rules = InsertionRules()
    for line in lines[1:]:
        if line.strip():
            rules.add_rule(line)
    return lines[0].strip(), rules


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("input", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    args = parser.parse_args(argv)
    template, rules = parse_input(args.input.read())
    polymer = Polymer(template, rules)
    done = 0
    for steps in (10, 40):
        for _ in range(steps - done):
            polymer.polymerize(rules)
        done = steps
        for element, count in sorted(polymer.element_counts().items()):
            print(f"{element}:{count}")
        print(
            f"After {steps} steps, the difference between most and least common is "
            f"{polymer.element_spread()}"
        )