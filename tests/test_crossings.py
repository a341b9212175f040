import random

import pytest
from hypothesis import given, strategies as st

from algotasks.crossings import count_crossings, count_inversions, main, parse_segments


def test_empty_and_single():
    assert count_inversions([]) == 0
    assert count_inversions([4]) == 0
    assert count_crossings([]) == 0


def test_sorted_distinct_has_no_inversions():
    assert count_inversions(list(range(50))) == 0


def test_descending_counts_every_pair():
    n = 30
    assert count_inversions(list(range(n, 0, -1))) == n * (n - 1) // 2


def test_equal_values_count_as_inversions():
    n = 6
    assert count_inversions([2] * n) == n * (n - 1) // 2


@given(st.lists(st.integers(), unique=True, max_size=60))
def test_inversions_of_reversal_complement(values):
    n = len(values)
    total = count_inversions(values) + count_inversions(values[::-1])
    assert total == n * (n - 1) // 2


def test_parallel_segments_do_not_cross():
    assert count_crossings([(1, 1), (2, 2), (3, 3)]) == 0


def test_fully_crossing_segments():
    segments = [(x, 10 - x) for x in range(1, 5)]
    assert count_crossings(segments) == 4 * 3 // 2


@given(st.lists(st.integers(-100, 100), unique=True, min_size=1, max_size=40), st.randoms())
def test_input_order_does_not_matter(x1s, rnd):
    segments = [(x1, rnd.randint(-100, 100)) for x1 in x1s]
    shuffled = list(segments)
    rnd.shuffle(shuffled)
    assert count_crossings(shuffled) == count_crossings(segments)


def test_parse_segments():
    assert parse_segments("2\n1 3\n2 -4\n") == [(1, 3), (2, -4)]


def test_parse_segments_truncated():
    with pytest.raises(ValueError):
        parse_segments("3\n1 2\n")


def test_main(tmp_path, capsys):
    source = tmp_path / "segments.txt"
    rows = [(x, 20 - x) for x in range(1, 6)]
    random.Random(1).shuffle(rows)
    source.write_text(f"{len(rows)}\n" + "".join(f"{a} {b}\n" for a, b in rows))
    assert main([str(source)]) == 0
    assert capsys.readouterr().out == f"{5 * 4 // 2}\n"