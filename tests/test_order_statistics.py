import pytest
from hypothesis import given, strategies as st

from algotasks.order_statistics import main, smallest_range
from algotasks.quickselect import generate_sequence, kth_range


@given(
    st.integers(-50, 50),
    st.integers(-50, 50),
    st.integers(-50, 50),
    st.integers(-50, 50),
    st.integers(-50, 50),
    st.integers(1, 50),
    st.data(),
)
def test_matches_quickselect(a, b, c, x0, x1, n, data):
    end = data.draw(st.integers(1, n))
    begin = data.draw(st.integers(1, end))
    expected = kth_range(list(generate_sequence(a, b, c, x0, x1, n)), begin, end)
    assert smallest_range(a, b, c, x0, x1, n, begin, end) == expected


def test_result_is_sorted_and_sized():
    result = smallest_range(3, -7, 11, 5, -2, 200, 10, 30)
    assert len(result) == 21
    assert result == sorted(result)


def test_single_element():
    assert smallest_range(1, 1, 0, 42, 7, 1, 1, 1) == [42]


@pytest.mark.parametrize("begin,end", [(0, 1), (2, 1), (1, 11)])
def test_invalid_range(begin, end):
    with pytest.raises(ValueError):
        smallest_range(1, 1, 0, 1, 1, 10, begin, end)


def test_main_writes_output(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("20 3 6\n2 -1 5 9 4\n")
    assert main([str(source), str(target)]) == 0
    expected = smallest_range(2, -1, 5, 9, 4, 20, 3, 6)
    assert target.read_text() == " ".join(map(str, expected))


def test_main_bad_range(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("5 4 9\n1 1 0 1 1\n")
    assert main([str(source), str(tmp_path / "out.txt")]) == 1