import pytest

from uniengine.sparse_set import SparseSet


def test_insert_and_get():
    s = SparseSet()
    s.insert(4, "four")
    assert s.get(4) == "four"
    assert len(s) == 1


def test_insert_existing_overwrites_without_growing():
    s = SparseSet()
    s.insert(2, "a")
    s.insert(2, "b")
    assert s.get(2) == "b"
    assert len(s) == 1
    assert s.ids() == [2]


def test_ids_in_insertion_order():
    s = SparseSet()
    for i in (3, 7, 9):
        s.insert(i, i * 10)
    assert s.ids() == [3, 7, 9]


def test_remove_moves_last_into_gap():
    s = SparseSet()
    for i in (3, 7, 9):
        s.insert(i, str(i))
    s.remove(3)
    assert s.ids() == [9, 7]
    assert s.get(9) == "9"
    assert s.get(7) == "7"
    assert not s.has_index(3)


def test_remove_last_element():
    s = SparseSet()
    s.insert(1, "x")
    s.remove(1)
    assert len(s) == 0
    assert 1 not in s


def test_remove_absent_is_noop():
    s = SparseSet()
    s.insert(0, "x")
    s.remove(5)
    s.remove(0)
    s.remove(0)
    assert len(s) == 0


def test_get_absent_raises_key_error():
    s = SparseSet()
    s.insert(1, "x")
    with pytest.raises(KeyError):
        s.get(0)
    with pytest.raises(KeyError):
        s.get(100)


def test_set_updates_and_rejects_absent():
    s = SparseSet()
    s.insert(5, 1)
    s.set(5, 2)
    assert s.get(5) == 2
    with pytest.raises(KeyError):
        s.set(6, 3)


def test_contains_and_has_index():
    s = SparseSet()
    s.insert(2, None)
    assert 2 in s
    assert s.has_index(2)
    assert not s.has_index(1)
    assert not s.has_index(-1)
    assert "2" not in s


def test_negative_id_rejected():
    s = SparseSet()
    with pytest.raises(ValueError):
        s.insert(-1, "x")


def test_reinsert_after_remove():
    s = SparseSet()
    s.insert(0, "a")
    s.insert(1, "b")
    s.remove(0)
    s.insert(0, "c")
    assert s.get(0) == "c"
    assert s.get(1) == "b"
    assert sorted(s.ids()) == [0, 1]


def test_ids_returns_copy():
    s = SparseSet()
    s.insert(0, "a")
    ids = s.ids()
    ids.append(99)
    assert s.ids() == [0]