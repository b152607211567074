"""Histogram of small non-negative integers, sequential or with worker threads."""

from __future__ import annotations

import argparse
import time
from collections.abc import Iterable, Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import islice
from pathlib import Path

BINS = 255
REPEAT = 10


def _tokens(path: str | Path) -> Iterator[str]:
    with open(path, encoding="utf-8") as stream:
        for line in stream:
            yield from line.split()


def read_values(path: str | Path, count: int) -> list[int]:
    """Read the first ``count`` integers from ``path``."""
    if count < 0:
        raise ValueError("count must not be negative")
    values = [int(token) for token in islice(_tokens(path), count)]
    if len(values) < count:
        raise ValueError(f"expected {count} values, found {len(values)}")
    return values


def _count(values: Iterable[int], bins: int) -> list[int]:
    counts = [0] * bins
    for value in values:
        if not 0 <= value < bins:
            raise ValueError(f"value {value} outside [0, {bins})")
        counts[value] += 1
    return counts


def histogram(values: Sequence[int], bins: int = BINS, workers: int = 1) -> list[int]:
    """Count occurrences of each value in ``[0, bins)``."""
    if bins < 1:
        raise ValueError("bins must be at least 1")
    if workers < 1:
        raise ValueError("workers must be at least 1")
    if workers == 1:
        return _count(values, bins)
    chunks = [values[offset::workers] for offset in range(workers)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        partials = list(pool.map(lambda chunk: _count(chunk, bins), chunks))
    return [sum(column) for column in zip(*partials)]


def format_histogram(hist: Sequence[int]) -> str:
    """Render one ``[value] - [count]`` line per bin."""
    return "\n".join(f"[{value}] - [{count}]" for value, count in enumerate(hist))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="histogram", description="Time the histogram of a file of integers."
    )
    parser.add_argument("count", type=int, help="how many values to read")
    parser.add_argument("file", help="file of whitespace-separated integers")
    parser.add_argument("--bins", type=int, default=BINS, help="number of bins")
    parser.add_argument("--workers", type=int, default=1, help="threads counting values")
    parser.add_argument("--repeat", type=int, default=REPEAT, help="timed runs")
    parser.add_argument("--show", action="store_true", help="print the histogram")
    args = parser.parse_args(argv)

    try:
        values = read_values(args.file, args.count)
    except OSError as exc:
        print(f"cannot read {args.file}: {exc.strerror}")
        return 1
    except ValueError as exc:
        parser.error(str(exc))

    result: list[int] = []
    for _ in range(args.repeat):
        start = time.perf_counter()
        try:
            result = histogram(values, args.bins, args.workers)
        except ValueError as exc:
            parser.error(str(exc))
        elapsed = time.perf_counter() - start
        print(f"Execution time: {elapsed:g} seconds")
    if args.show:
        print(format_histogram(result or [0] * args.bins))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())