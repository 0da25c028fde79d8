import pytest

from indexset.core import BaseIndexSet
from indexset.slice import SetSlice


class Box:
    """Equal by value but distinct by identity."""

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        return isinstance(other, Box) and self.value == other.value

    def __hash__(self):
        return hash(self.value)


def assert_consistent(s):
    for position, value in enumerate(s):
        assert s.get_index_of(value) == position
        assert s.get_index(position) == value


def test_it_works():
    s = BaseIndexSet()
    assert len(s) == 0
    s.insert(1)
    s.insert(1)
    assert len(s) == 1
    assert s.get(1) == 1
    assert 1 in s


def test_new():
    s = BaseIndexSet()
    assert len(s) == 0
    assert list(s) == []
    assert repr(s) == "BaseIndexSet([])"


def test_insert():
    insert = [0, 4, 2, 12, 8, 7, 11, 5]
    not_present = [1, 3, 6, 9, 10]
    s = BaseIndexSet()
    for i, elt in enumerate(insert):
        assert len(s) == i
        s.insert(elt)
        assert len(s) == i + 1
        assert s.get(elt) == elt
    for elt in not_present:
        assert s.get(elt) is None


def test_insert_full():
    insert = [9, 2, 7, 1, 4, 6, 13]
    present = [1, 6, 2]
    s = BaseIndexSet()
    for i, elt in enumerate(insert):
        assert len(s) == i
        index, success = s.insert_full(elt)
        assert success
        assert s.get_full(elt)[0] == index
        assert len(s) == i + 1
    length = len(s)
    for elt in present:
        index, success = s.insert_full(elt)
        assert not success
        assert s.get_full(elt)[0] == index
        assert len(s) == length


def test_insert_2():
    values = list(range(16)) + list(range(128, 267))
    s = BaseIndexSet()
    for value in values:
        old = s.copy()
        s.insert(value)
        for previous in old:
            assert s.get(previous) == previous
    for value in values:
        assert value in s
    assert list(s) == values


def test_insert_dup():
    s = BaseIndexSet([0, 2, 4, 6, 8])
    assert s.get_full(0) == (0, 0)
    assert len(s) == 5
    assert s.insert(0) is False
    assert s.get_full(0) == (0, 0)
    assert len(s) == 5


def test_insert_order():
    insert = [0, 4, 2, 12, 8, 7, 11, 5, 3, 17, 19, 22, 23]
    s = BaseIndexSet()
    for elt in insert:
        s.insert(elt)
    assert len(s) == len(insert)
    assert list(s) == insert
    assert_consistent(s)


def test_replace():
    replace = [0, 4, 2, 12, 8, 7, 11, 5]
    s = BaseIndexSet()
    for i, elt in enumerate(replace):
        assert len(s) == i
        assert s.replace(elt) is None
        assert len(s) == i + 1
        assert s.get(elt) == elt
    for elt in [1, 3, 6, 9, 10]:
        assert s.get(elt) is None


def test_replace_full():
    replace = [9, 2, 7, 1, 4, 6, 13]
    present = [1, 6, 2]
    s = BaseIndexSet()
    for i, elt in enumerate(replace):
        index, replaced = s.replace_full(elt)
        assert replaced is None
        assert s.get_full(elt)[0] == index
        assert len(s) == i + 1
    length = len(s)
    for elt in present:
        index, replaced = s.replace_full(elt)
        assert replaced == elt
        assert s.get_full(elt)[0] == index
        assert len(s) == length


def test_replace_dup_and_order():
    s = BaseIndexSet([0, 2, 4, 6, 8])
    assert s.replace(0) == 0
    assert s.get_full(0) == (0, 0)
    assert len(s) == 5
    order = [0, 4, 2, 12, 8, 7, 11, 5, 3, 17, 19, 22, 23]
    t = BaseIndexSet()
    for elt in order:
        t.replace(elt)
    assert list(t) == order


def test_replace_change():
    original = Box(42)
    s = BaseIndexSet([original])
    new = Box(42)
    replaced = s.replace(new)
    assert replaced is original
    assert s[0] is new
    assert s.get(Box(42)) is new


def test_grow():
    insert = [0, 4, 2, 12, 8, 7, 11]
    s = BaseIndexSet(insert)
    for elt in insert:
        s.insert(elt * 10)
    for elt in insert:
        s.insert(elt * 100)
    for i in range(100):
        s.insert(insert[i % len(insert)] * 100 + i)
    for elt in [1, 3, 6, 9, 10]:
        assert s.get(elt) is None
    for elt in insert:
        assert elt * 10 in s
        assert elt * 100 in s
    assert_consistent(s)


def test_remove():
    insert = [0, 4, 2, 12, 8, 7, 11, 5, 3, 17, 19, 22, 23]
    s = BaseIndexSet(insert)
    for value in [99, 77]:
        assert s.swap_remove_full(value) is None
    remove = [4, 12, 8, 7]
    for value in remove:
        index = s.get_full(value)[0]
        assert s.swap_remove_full(value) == (index, value)
    for value in insert:
        assert (s.get(value) is not None) == (value not in remove)
    assert len(s) == len(insert) - len(remove)
    assert_consistent(s)


def test_swap_remove_index():
    s = BaseIndexSet([0, 4, 2, 12, 8, 7, 11, 5, 3, 17, 19, 22, 23])
    removed = [s.swap_remove_index(i) for i in [3, 3, 10, 4, 5, 4, 3, 0, 1]]
    assert removed == [12, 23, 19, 8, 7, 17, 22, 0, 4]
    assert list(s) == [3, 5, 2, 11]
    assert s.swap_remove_index(10) is None
    assert_consistent(s)


def test_shift_remove_keeps_order():
    s = BaseIndexSet([1, 2, 3, 4, 5])
    assert s.shift_remove(2) is True
    assert s.shift_remove(9) is False
    assert list(s) == [1, 3, 4, 5]
    assert s.shift_remove_full(4) == (2, 4)
    assert s.shift_take(1) == 1
    assert s.shift_remove_index(0) == 3
    assert list(s) == [5]
    assert_consistent(s)


def test_swap_take_and_remove():
    s = BaseIndexSet(["a", "b", "c", "d"])
    assert s.swap_take("a") == "a"
    assert list(s) == ["d", "b", "c"]
    assert s.swap_take("z") is None
    assert s.swap_remove("b") is True
    assert list(s) == ["d", "c"]
    assert_consistent(s)


def test_extend():
    s = BaseIndexSet()
    s.extend([1, 2, 3, 4])
    s.extend([5, 6, 1])
    assert list(s) == [1, 2, 3, 4, 5, 6]


def test_splice():
    s = BaseIndexSet([0, 1, 2, 3, 4])
    removed = s.splice(range(2, 4), [5, 4, 3, 2, 1])
    assert list(s) == [0, 1, 5, 3, 2, 4]
    assert removed == [2, 3]
    assert_consistent(s)


def test_splice_skips_repeated_replacements():
    s = BaseIndexSet(["a", "b", "c"])
    assert s.splice(slice(0, 1), ["x", "x", "c", "y"]) == ["a"]
    assert list(s) == ["x", "y", "b", "c"]
    assert_consistent(s)


def test_splice_bad_bounds():
    s = BaseIndexSet([1, 2])
    with pytest.raises(IndexError):
        s.splice(slice(0, 5), [])
    assert list(s) == [1, 2]


def test_drain():
    s = BaseIndexSet([1, 2, 3, 4, 5])
    assert s.drain(slice(1, 3)) == [2, 3]
    assert list(s) == [1, 4, 5]
    assert 2 not in s
    assert_consistent(s)
    assert s.drain() == [1, 4, 5]
    assert len(s) == 0


def test_drain_errors():
    s = BaseIndexSet([1, 2, 3])
    with pytest.raises(ValueError):
        s.drain(slice(2, 1))
    with pytest.raises(IndexError):
        s.drain(slice(0, 10))
    assert list(s) == [1, 2, 3]


def test_split_off():
    s = BaseIndexSet([1, 2, 3, 4])
    tail = s.split_off(1)
    assert list(s) == [1]
    assert list(tail) == [2, 3, 4]
    assert tail.get_index_of(2) == 0
    with pytest.raises(IndexError):
        s.split_off(5)


def test_truncate_and_clear():
    s = BaseIndexSet([1, 2, 3, 4])
    s.truncate(10)
    assert list(s) == [1, 2, 3, 4]
    s.truncate(2)
    assert list(s) == [1, 2]
    assert 3 not in s
    s.clear()
    assert list(s) == []
    assert 1 not in s


def test_pop():
    s = BaseIndexSet([1, 2, 3])
    assert s.pop() == 3
    assert list(s) == [1, 2]
    s.clear()
    assert s.pop() is None


def test_retain():
    s = BaseIndexSet(range(10))
    s.retain(lambda x: x % 3 == 0)
    assert list(s) == [0, 3, 6, 9]
    assert_consistent(s)


def test_positional_access():
    s = BaseIndexSet([10, 20, 30])
    assert s.first() == 10
    assert s.last() == 30
    assert s[1] == 20
    assert list(reversed(s)) == [30, 20, 10]
    assert s.get_index(3) is None
    with pytest.raises(IndexError):
        s[3]
    empty = BaseIndexSet()
    assert empty.first() is None
    assert empty.last() is None


def test_slices():
    s = BaseIndexSet([1, 4, 9, 16])
    assert s.as_slice() == SetSlice([1, 4, 9, 16])
    assert s[1:3] == SetSlice([4, 9])
    assert s.get_range(slice(1, None)) == SetSlice([4, 9, 16])
    assert s.get_range(slice(3, 10)) is None
    with pytest.raises(IndexError):
        s[0:10]


def test_move_index():
    s = BaseIndexSet([0, 1, 2, 3, 4])
    s.move_index(1, 3)
    assert list(s) == [0, 2, 3, 1, 4]
    s.move_index(4, 0)
    assert list(s) == [4, 0, 2, 3, 1]
    assert_consistent(s)
    with pytest.raises(IndexError):
        s.move_index(0, 5)


def test_swap_indices():
    s = BaseIndexSet(["a", "b", "c"])
    s.swap_indices(0, 2)
    assert list(s) == ["c", "b", "a"]
    assert_consistent(s)
    with pytest.raises(IndexError):
        s.swap_indices(0, 3)


def test_copy_is_independent():
    s = BaseIndexSet([1, 2])
    c = s.copy()
    c.insert(3)
    assert list(s) == [1, 2]
    assert list(c) == [1, 2, 3]


def test_unhashable_value():
    s = BaseIndexSet()
    with pytest.raises(TypeError):
        s.insert([1, 2])