# parlab

A small set of number-crunching experiments. Each one is both a library
module and a command-line tool:

- **genlist** (`parlab.genlist`) writes pseudo-random non-negative integers
  to a file, one per line. The same seed always gives the same list.
- **bucket** (`parlab.bucket`) reads numbers from a file, bucket-sorts them
  and prints the time the sort took.
- **friendly** (`parlab.friendly`) finds friendly numbers, numbers with the
  same abundancy σ(n)/n, inside ranges read from standard input.
- **histogram** (`parlab.histogram`) reads integers from a file, counts them
  into bins and prints the time taken for each of several runs.

The bucket sort and the histogram can spread their work over worker threads.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command-line use

Write 100000 values in the range `0..399999` (the default range) to a file:

```
parlab-genlist 100000 numbers.txt
```

Options: `--range N` makes the values lie in `0..N-1`, and `--seed S` picks
the generator seed (default 1).

Sort the file and print the elapsed time:

```
parlab-bucket numbers.txt
```

Options: `--buckets` (default 100), `--workers` (threads that sort the
buckets, default 1) and `--show` to print the sorted values with two
decimals. Reading stops at the first token that is not a number. The values
must not be negative.

Write values in the range `0..254` and time the histogram of the first
100000 of them:

```
parlab-genlist 100000 values.txt --range 255
parlab-histogram 100000 values.txt
```

Options: `--bins` (default 255), `--workers` (default 1), `--repeat` (timed
runs, default 10) and `--show` to print one `[value] - [count]` line per
bin. A value outside the bins, or a file with fewer values than asked for,
is reported as an error.

Find friendly numbers. The input is pairs of `start end`; the pair `0 0`
stops reading:

```
$ printf '6 30\n0 0\n' | parlab-friendly
Number 6 to 30
6 and 28 are FRIENDLY
```

Run any command with `--help` for its options.

## Library use

```python
from parlab.bucket import bucket_sort, find_max, format_values
from parlab.friendly import abundancy, divisor_sum, friendly_pairs
from parlab.genlist import generate, write_list
from parlab.histogram import format_histogram, histogram

values = generate(1000, 400000, 1)
ordered = bucket_sort(values, 100, 4)

for first, second in friendly_pairs(6, 30):
    print(first, second)   # 6 28

abundancy(28)              # (2, 1)

counts = histogram(generate(1000, 255, 1), 255, 8)
print(format_histogram(counts))
```

- `bucket_sort` returns a new sorted list and leaves its input as it is; it
  raises `ValueError` for negative values.
- `histogram` returns one count per bin and raises `ValueError` for a value
  outside the bins.
- `friendly_pairs` yields every pair `(a, b)` with `start <= a < b <= end`
  whose reduced abundancy fractions are equal.
- `write_list(path, count, value_range, seed)` writes what `generate`
  returns, one value per line.