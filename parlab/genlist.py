"""Generate files of pseudo-random non-negative integers, one per line."""

from __future__ import annotations

import argparse
from collections import deque
from collections.abc import Iterator
from itertools import islice
from pathlib import Path

BUCKET_RANGE = 400000
HISTOGRAM_RANGE = 255
DEFAULT_SEED = 1

_MASK32 = 0xFFFFFFFF
_DISCARD = 310


def _to_int32(value: int) -> int:
    value &= _MASK32
    return value - (1 << 32) if value & 0x80000000 else value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _rand_stream(seed: int) -> Iterator[int]:
    """Yield the values of the C library's additive-feedback rand() for a seed."""
    word = _to_int32(seed)
    if word == 0:
        word = 1
    state = [word]
    for _ in range(30):
        hi = _trunc_div(word, 127773)
        lo = word - hi * 127773
        word = 16807 * lo - 2836 * hi
        if word < 0:
            word += 2147483647
        state.append(word)
    state.extend(state[:3])
    ring = deque(state, maxlen=34)

    def advance() -> int:
        value = (ring[-31] + ring[-3]) & _MASK32
        ring.append(value)
        return value

    for _ in range(_DISCARD):
        advance()
    while True:
        yield advance() >> 1


def generate(count: int, value_range: int = BUCKET_RANGE, seed: int = DEFAULT_SEED) -> list[int]:
    """Return ``count`` pseudo-random integers in ``[0, value_range)``."""
    if count < 0:
        raise ValueError("count must not be negative")
    if value_range <= 0:
        raise ValueError("value_range must be positive")
    return [value % value_range for value in islice(_rand_stream(seed), count)]


def write_list(
    path: str | Path,
    count: int,
    value_range: int = BUCKET_RANGE,
    seed: int = DEFAULT_SEED,
) -> None:
    """Write ``count`` generated integers to ``path``, one per line."""
    values = generate(count, value_range, seed)
    with open(path, "w", encoding="ascii") as stream:
        stream.writelines(f"{value}\n" for value in values)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="genlist", description="Write a list of random integers to a file."
    )
    parser.add_argument("count", type=int, help="how many values to write")
    parser.add_argument("output", help="file to write")
    parser.add_argument(
        "--range",
        dest="value_range",
        type=int,
        default=BUCKET_RANGE,
        help=f"values lie in [0, RANGE) (default {BUCKET_RANGE}; "
        f"use {HISTOGRAM_RANGE} for histogram input)",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="generator seed")
    args = parser.parse_args(argv)
    try:
        write_list(args.output, args.count, args.value_range, args.seed)
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())