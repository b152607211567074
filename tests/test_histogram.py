import random

import pytest

from parlab.histogram import BINS, format_histogram, histogram, main, read_values


def _sample(count, seed):
    rng = random.Random(seed)
    return [rng.randrange(BINS) for _ in range(count)]


def test_histogram_counts():
    hist = histogram([0, 1, 1, 254])
    assert len(hist) == BINS
    assert hist[0] == 1
    assert hist[1] == 2
    assert hist[254] == 1
    assert sum(hist) == 4


def test_histogram_total_matches_input():
    data = _sample(5000, 1)
    assert sum(histogram(data)) == len(data)


def test_histogram_workers_match_sequential():
    data = _sample(5000, 2)
    assert histogram(data, workers=8) == histogram(data)


def test_histogram_matches_list_count():
    data = _sample(500, 3)
    hist = histogram(data)
    assert all(hist[v] == data.count(v) for v in set(data))


def test_histogram_out_of_range_rejected():
    with pytest.raises(ValueError):
        histogram([0, BINS])


def test_histogram_negative_rejected():
    with pytest.raises(ValueError):
        histogram([-1], workers=2)


def test_format_histogram():
    assert format_histogram([3, 0]) == "[0] - [3]\n[1] - [0]"


def test_read_values_takes_first_count(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("5\n7 9\n11\n")
    assert read_values(path, 3) == [5, 7, 9]


def test_read_values_too_few_rejected(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("5\n7\n")
    with pytest.raises(ValueError):
        read_values(path, 3)


def test_main_prints_timings(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("\n".join(str(v) for v in _sample(100, 4)) + "\n")
    assert main(["100", str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 10
    assert all(line.startswith("Execution time: ") and line.endswith(" seconds") for line in lines)


def test_main_show_prints_histogram(tmp_path, capsys):
    path = tmp_path / "data.txt"
    path.write_text("2\n2\n0\n")
    assert main(["3", str(path), "--repeat", "1", "--show"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[1] == "[0] - [1]"
    assert lines[3] == "[2] - [2]"
    assert len(lines) == 1 + BINS