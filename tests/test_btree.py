import pytest

from algotasks.btree import BTreeNode, check_text, is_btree, main, parse_node

VALID = """4 2 1
branch 0x1: (2: 10 20) (3: 0x2 0x3 0x4)
leaf 0x2: (2: 1 5)
leaf 0x3: (1: 15)
leaf 0x4: (2: 25 30)
"""


def test_parse_leaf():
    node = parse_node("leaf 0x2: (2: 1 5)")
    assert node.id == 2
    assert node.is_leaf
    assert node.keys == (1, 5)
    assert node.children == ()


def test_parse_branch():
    node = parse_node("branch 0x1: (2: 10 20) (3: 0x2 0x3 0x4)")
    assert not node.is_leaf
    assert node.keys == (10, 20)
    assert node.children == (2, 3, 4)


def test_id_digits_read_as_decimal():
    assert parse_node("leaf 0x10: (1: 7)").id == 10


def test_nodes_compare_by_id():
    assert BTreeNode(3, True, (1,)) == BTreeNode(3)
    assert BTreeNode(2) < BTreeNode(3, True, (9,))


def test_valid_tree():
    assert check_text(VALID) is True


def test_keys_out_of_order():
    text = VALID.replace("(2: 1 5)", "(2: 5 1)")
    assert check_text(text) is False


def test_key_outside_parent_range():
    text = VALID.replace("(1: 15)", "(1: 25)")
    assert check_text(text) is False


def test_missing_child():
    text = VALID.replace("0x4)", "0x9)")
    assert check_text(text) is False


def test_leaves_at_different_depths():
    nodes = [
        BTreeNode(1, False, (10,), (2, 3)),
        BTreeNode(2, True, (5,)),
        BTreeNode(3, False, (20,), (4, 5)),
        BTreeNode(4, True, (15,)),
        BTreeNode(5, True, (25,)),
    ]
    assert is_btree(nodes, 2, 1) is False


def test_too_many_keys():
    nodes = [BTreeNode(1, True, (1, 2, 3, 4))]
    assert is_btree(nodes, 2, 1) is False
    assert is_btree(nodes, 3, 1) is True


def test_empty_root():
    assert is_btree([BTreeNode(1, True, ())], 2, 1) is False


def test_missing_root():
    assert is_btree([BTreeNode(1, True, (1,))], 2, 7) is False


def test_too_many_tokens_is_rejected():
    text = "1 1 1\nleaf 0x1: (3: 1 2 3 4 5 6 7)\n"
    assert check_text(text) is False


def test_child_cycle_is_rejected():
    nodes = [BTreeNode(1, False, (10,), (1, 2)), BTreeNode(2, True, (20,))]
    assert is_btree(nodes, 2, 1) is False


def test_missing_lines_raise():
    with pytest.raises(ValueError):
        check_text("3 2 1\nleaf 0x1: (1: 5)\n")


def test_main_prints_answer(tmp_path, capsys):
    path = tmp_path / "tree.txt"
    path.write_text(VALID)
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "yes"