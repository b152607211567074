import pytest

from parlab.genlist import (
    BUCKET_RANGE,
    HISTOGRAM_RANGE,
    generate,
    main,
    write_list,
)


def test_default_seed_matches_c_library_sequence():
    assert generate(3, 2**31, 1) == [1804289383, 846930886, 1681692777]


def test_values_lie_in_range():
    values = generate(1000, HISTOGRAM_RANGE, 1)
    assert len(values) == 1000
    assert all(0 <= v < HISTOGRAM_RANGE for v in values)


def test_generation_is_deterministic():
    first = generate(3, BUCKET_RANGE, 1)
    second = generate(3, BUCKET_RANGE, 1)
    assert first == [289383, 130886, 92777]
    assert second == [289383, 130886, 92777]


def test_different_seeds_give_different_lists():
    assert generate(20, BUCKET_RANGE, 1) != generate(20, BUCKET_RANGE, 2)


def test_seed_zero_behaves_like_seed_one():
    assert generate(10, BUCKET_RANGE, 0) == generate(10, BUCKET_RANGE, 1)


def test_prefix_property():
    assert generate(5, 100, 3) == generate(10, 100, 3)[:5]


def test_zero_count_gives_empty_list():
    assert generate(0, 10, 1) == []


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        generate(-1, 10, 1)


def test_non_positive_range_rejected():
    with pytest.raises(ValueError):
        generate(5, 0, 1)


def test_write_list_round_trip(tmp_path):
    path = tmp_path / "list.txt"
    write_list(path, 25, 1000, 4)
    lines = path.read_text().splitlines()
    assert [int(line) for line in lines] == generate(25, 1000, 4)


def test_main_writes_file(tmp_path):
    path = tmp_path / "out.txt"
    assert main(["12", str(path), "--range", str(HISTOGRAM_RANGE)]) == 0
    content = path.read_text()
    assert content.endswith("\n")
    assert [int(x) for x in content.split()] == generate(12, HISTOGRAM_RANGE, 1)