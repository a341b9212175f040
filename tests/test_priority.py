import pytest
from hypothesis import given, strategies as st

from algotasks.priority import IndexedHeap, ProbingMap, main, process_commands


def test_map_insert_find_change_erase():
    table = ProbingMap(8)
    table.insert(5, 50)
    table.insert(-3, 30)
    assert table.find(5) == 50
    assert table.find(-3) == 30
    table.change(5, 55)
    assert table.find(5) == 55
    table.erase(5)
    assert table.find(5) is None
    assert table.find(-3) == 30


def test_map_missing_key():
    table = ProbingMap(4)
    assert table.find(7) is None
    table.change(7, 1)
    assert table.find(7) is None


def test_map_duplicate_key_keeps_first_value():
    table = ProbingMap(4)
    table.insert(9, 1)
    table.insert(9, 2)
    assert table.find(9) == 1


def test_map_reinsert_after_erase():
    table = ProbingMap(4)
    table.insert(9, 1)
    table.erase(9)
    table.insert(9, 2)
    assert table.find(9) == 2


def test_map_full_table_drops_insert():
    table = ProbingMap(2)
    table.insert(1, 10)
    table.insert(2, 20)
    table.insert(3, 30)
    assert table.find(3) is None
    assert table.find(1) == 10
    assert table.find(2) == 20


def test_map_negative_size():
    with pytest.raises(ValueError):
        ProbingMap(-1)


@given(st.lists(st.integers(min_value=-10**6, max_value=10**6), max_size=100))
def test_heap_extracts_in_sorted_order(values):
    heap = IndexedHeap(200)
    for value in values:
        heap.insert(value)
    assert len(heap) == len(values)
    extracted = [heap.extract_min() for _ in values]
    assert extracted == sorted(values)


def test_heap_empty_extract_raises():
    heap = IndexedHeap(4)
    with pytest.raises(IndexError):
        heap.extract_min()


def test_heap_full_insert_raises():
    heap = IndexedHeap(2)
    heap.insert(1)
    heap.insert(2)
    with pytest.raises(IndexError):
        heap.insert(3)


def test_heap_change_decreases_key():
    heap = IndexedHeap(10)
    for value in (5, 3, 8):
        heap.insert(value)
    heap.change(8, 1)
    assert [heap.extract_min() for _ in range(3)] == [1, 3, 5]


def test_heap_change_missing_value_is_ignored():
    heap = IndexedHeap(10)
    heap.insert(4)
    heap.change(99, 0)
    assert heap.extract_min() == 4
    assert len(heap) == 0


def test_heap_change_after_extract():
    heap = IndexedHeap(10)
    for value in (3, 4, 2):
        heap.insert(value)
    assert heap.extract_min() == 2
    heap.change(4, 1)
    assert heap.extract_min() == 1
    assert heap.extract_min() == 3


def test_process_commands():
    lines = [
        "push 3",
        "push 4",
        "push 2",
        "extract-min",
        "decrease-key 2 1",
        "extract-min",
        "extract-min",
        "extract-min",
    ]
    assert process_commands(lines) == ["2", "1", "3", "*"]


def test_process_commands_missing_argument():
    with pytest.raises(ValueError):
        process_commands(["push"])


def test_main_writes_output(tmp_path):
    source = tmp_path / "in.txt"
    target = tmp_path / "out.txt"
    source.write_text("push 7\npush 6\nextract-min\nextract-min\nextract-min\n")
    assert main([str(source), str(target)]) == 0
    assert target.read_text() == "6\n7\n*\n"


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "absent.txt"), str(tmp_path / "out.txt")]) == 1