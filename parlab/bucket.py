"""Bucket sort of floating-point values, sequential or with worker threads."""

from __future__ import annotations

import argparse
import bisect
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from itertools import chain
from pathlib import Path

BUCKET_COUNT = 100


def find_max(values: Iterable[float]) -> float:
    """Return the largest value; raise ValueError when there is none."""
    items = list(values)
    if not items:
        raise ValueError("cannot find the maximum of an empty sequence")
    return max(items)


def insertion_sort(values: Iterable[float]) -> list[float]:
    """Return the values sorted by stable insertion."""
    result: list[float] = []
    for value in values:
        bisect.insort_right(result, value)
    return result


def bucket_sort(
    values: Iterable[float], bucket_count: int = BUCKET_COUNT, workers: int = 1
) -> list[float]:
    """Return the non-negative ``values`` sorted using ``bucket_count`` buckets.

    With ``workers`` above one the buckets are sorted concurrently.
    """
    if bucket_count < 1:
        raise ValueError("bucket_count must be at least 1")
    if workers < 1:
        raise ValueError("workers must be at least 1")
    items = list(values)
    if not items:
        return []
    if any(value < 0 for value in items):
        raise ValueError("bucket sort needs non-negative values")

    top = find_max(items)
    buckets: list[list[float]] = [[] for _ in range(bucket_count)]
    for value in items:
        index = min(int(value * bucket_count / (top + 1)), bucket_count - 1)
        buckets[index].append(value)

    if workers > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            ordered = list(pool.map(insertion_sort, buckets))
    else:
        ordered = [insertion_sort(bucket) for bucket in buckets]
    return list(chain.from_iterable(ordered))


def read_values(path: str | Path) -> list[float]:
    """Read whitespace-separated numbers, stopping at the first that does not parse."""
    values: list[float] = []
    with open(path, encoding="utf-8") as stream:
        for token in stream.read().split():
            try:
                values.append(float(token))
            except ValueError:
                break
    return values


def format_values(values: Sequence[float]) -> str:
    """Render values with two decimals, each followed by a space."""
    return "".join(f"{value:.2f} " for value in values)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bucket", description="Bucket sort the numbers in a file and time it."
    )
    parser.add_argument("file", help="file of whitespace-separated numbers")
    parser.add_argument("--buckets", type=int, default=BUCKET_COUNT, help="number of buckets")
    parser.add_argument("--workers", type=int, default=1, help="threads sorting buckets")
    parser.add_argument("--show", action="store_true", help="print the sorted values")
    args = parser.parse_args(argv)

    try:
        values = read_values(args.file)
    except OSError:
        print("Erro ao abrir o arquivo!")
        return 1

    start = time.perf_counter()
    try:
        result = bucket_sort(values, args.buckets, args.workers)
    except ValueError as exc:
        parser.error(str(exc))
    elapsed = time.perf_counter() - start
    print(f"execution time = {elapsed:f}")
    if args.show:
        print(format_values(result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())