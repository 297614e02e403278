import pytest

from patternkit.iterators import BinaryTree, IntSlice, Node, file_lines, inorder


def _sample_tree():
    return Node(
        4,
        Node(2, Node(1), Node(3)),
        Node(6, Node(5), Node(7)),
    )


def test_int_slice_yields_items_in_order():
    items = [2, 4, 6, 8, 10]
    assert list(IntSlice(items)) == items


def test_int_slice_can_be_iterated_twice():
    numbers = IntSlice([2, 4, 6])
    assert list(numbers) == [2, 4, 6]
    assert list(numbers) == [2, 4, 6]


def test_int_slice_iterator_exhausts():
    it = iter(IntSlice([7]))
    assert next(it) == 7
    assert next(it, "done") == "done"


def test_binary_tree_in_order():
    tree = BinaryTree(_sample_tree())
    assert [node.value for node in tree] == [1, 2, 3, 4, 5, 6, 7]


def test_inorder_of_search_tree_is_sorted():
    root = Node(50, Node(20, None, Node(30, Node(25))), Node(80, Node(60)))
    values = [node.value for node in inorder(root)]
    assert values == sorted(values)
    assert len(values) == 6


def test_empty_tree():
    assert list(BinaryTree()) == []


def test_file_lines_strips_endings(tmp_path):
    path = tmp_path / "data.txt"
    path.write_bytes(b"first\r\nsecond\nthird")
    assert list(file_lines(str(path))) == ["first", "second", "third"]


def test_file_lines_empty_file(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    assert list(file_lines(str(path))) == []


def test_file_lines_missing_file_raises_immediately(tmp_path):
    with pytest.raises(FileNotFoundError):
        file_lines(str(tmp_path / "missing.txt"))