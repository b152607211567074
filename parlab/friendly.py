"""Search ranges of integers for friendly numbers (equal abundancy)."""

from __future__ import annotations

import argparse
import sys
from collections import Counter, defaultdict
from collections.abc import Iterable, Iterator


def _c_rem(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _c_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def gcd(u: int, v: int) -> int:
    """Greatest common divisor by Euclid's algorithm with truncating remainder."""
    while v != 0:
        u, v = v, _c_rem(u, v)
    return u


def divisor_sum(n: int) -> int:
    """Return ``1 + n`` plus every other divisor of ``n`` found by trial division."""
    total = 1 + n
    limit = n
    factor = 2
    while factor < limit:
        if _c_rem(n, factor) == 0:
            cofactor = _c_div(n, factor)
            total += factor + cofactor
            limit = cofactor
            if cofactor == factor:
                total -= factor
        factor += 1
    return total


def abundancy(n: int) -> tuple[int, int]:
    """Return the divisor sum over ``n`` as a reduced (numerator, denominator) pair."""
    total = divisor_sum(n)
    common = gcd(total, n)
    return _c_div(total, common), _c_div(n, common)


def friendly_pairs(start: int, end: int) -> Iterator[tuple[int, int]]:
    """Yield every pair ``(a, b)``, ``start <= a < b <= end``, of equal abundancy."""
    keyed = [(n, abundancy(n)) for n in range(start, end + 1)]
    groups: dict[tuple[int, int], list[int]] = defaultdict(list)
    for n, key in keyed:
        groups[key].append(n)
    seen: Counter[tuple[int, int]] = Counter()
    for n, key in keyed:
        position = seen[key]
        seen[key] += 1
        for other in groups[key][position + 1 :]:
            yield n, other


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="friendly",
        description="Read 'start end' ranges from standard input until '0 0' "
        "and print the friendly pairs in each.",
    )
    parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    for start_text, end_text in zip(tokens, tokens):
        try:
            start, end = int(start_text), int(end_text)
        except ValueError:
            break
        if start == 0 and end == 0:
            break
        print(f"Number {start} to {end}")
        for a, b in friendly_pairs(start, end):
            print(f"{a} and {b} are FRIENDLY")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())