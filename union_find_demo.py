from __future__ import annotations
import time
from typing import Hashable, Iterable, List, Tuple

from disjoint_set.union_find import UnionFind


class UnionFindDemoException(Exception):
    pass


NUMBERS = range(1, 11)
NUMBER_CHECKS = [((1, 3), True), ((3, 5), True), ((5, 7), True),
                 ((2, 4), True), ((4, 6), True), ((6, 8), True),
                 ((1, 2), False), ((3, 8), False)]

WORD_ROOTS = ["a", "b"]
WORDS = ["all", "burden", "after", "awesome", "boy", "bye"]
A_WORDS = ["a", "all", "after", "awesome"]
B_WORDS = ["b", "burden", "boy", "bye"]

Check = Tuple[Tuple[Hashable, Hashable], bool]


def build_numbers() -> UnionFind[int]:
    numbers = UnionFind(NUMBERS)
    for i in range(3, 11):
        if i % 2 == 0:
            numbers.union(2, i)
        else:
            numbers.union(1, i)
    return numbers


def build_words() -> UnionFind[str]:
    words = UnionFind(WORD_ROOTS)
    for word in WORDS:
        words.add(word)
        if word.startswith("a"):
            words.union("a", word)
        else:
            words.union("b", word)
    return words


def word_checks() -> List[Check]:
    checks = [((first, second), True)
              for group in (A_WORDS, B_WORDS)
              for first in group
              for second in group]
    checks.append((("a", "b"), False))
    checks.append((("after", "bye"), False))
    return checks


def run_checks(name: str, union_find: UnionFind, checks: Iterable[Check]) -> None:
    for (first, second), expected in checks:
        result = union_find.are_in_the_same_component(first, second)
        print(f"{name}: {first!r} and {second!r} in the same group: {result}")
        if result != expected:
            raise UnionFindDemoException(f"Expected {expected} for {first!r} and {second!r}, got {result}")


def main():
    scenarios = [("numbers", build_numbers, NUMBER_CHECKS),
                 ("words", build_words, word_checks())]
    for name, build, checks in scenarios:
        start = time.time()
        try:
            run_checks(name, build(), checks)
        except UnionFindDemoException:
            print(f"Wrong answer in the {name} scenario")
            raise
        print(f"Checked the {name} scenario in {time.time() - start:.06f} seconds")


if __name__ == "__main__":
    main()
