import pytest
from hypothesis import given, strategies as st

from algotasks.radix import first_letters, load_words, lsd_sort, main


def test_load_words_transposes():
    assert load_words(["ab", "cd"], 2, 2) == ["ac", "bd"]


def test_load_words_missing_rows():
    with pytest.raises(ValueError):
        load_words(["abc"], 3, 2)


def test_load_words_short_row():
    with pytest.raises(ValueError):
        load_words(["ab", "c"], 2, 2)


words_strategy = st.integers(1, 5).flatmap(
    lambda n: st.lists(st.text(alphabet="abcz", min_size=n, max_size=n), max_size=30)
)


@given(words_strategy)
def test_full_sort_matches_sorted(words):
    k = len(words[0]) if words else 0
    assert lsd_sort(words, k) == sorted(words)


@given(words_strategy)
def test_zero_k_keeps_order(words):
    assert lsd_sort(words, 0) == words


@given(words_strategy)
def test_last_character_sort_is_stable(words):
    assert lsd_sort(words, 1) == sorted(words, key=lambda w: w[-1])


def test_k_too_large():
    with pytest.raises(ValueError):
        lsd_sort(["ab", "cd"], 3)


def test_first_letters():
    assert first_letters(["xy", "za", "qq"]) == "xzq"


def test_main(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("3 2 1\nbca\nbac\n")
    assert main([str(source), str(target)]) == 0
    assert target.read_text() == "cba"


def test_main_bad_input(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("3 2 1\nbca\n")
    assert main([str(source), str(tmp_path / "out.txt")]) == 1