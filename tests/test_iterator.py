import pytest

from patternbook.iterator import Iterable, main


def test_iterates_added_values_in_order():
    it = Iterable(10)
    for value in (5, 1, 4):
        assert it.add(value) is True
    assert list(it) == [5, 1, 4]


def test_add_keeps_one_slot_free():
    it = Iterable(3)
    results = [it.add(value) for value in ("a", "b", "c")]
    assert results == [True, True, False]
    assert list(it) == ["a", "b"]


def test_assign_replaces_contents():
    it = Iterable(2)
    it.assign(["Hello", "World"])
    assert len(it) == 2
    assert list(it) == ["Hello", "World"]


def test_assign_over_capacity_raises():
    it = Iterable(2)
    with pytest.raises(ValueError):
        it.assign([1, 2, 3])


def test_has_next_tracks_cursor():
    it = Iterable(5)
    it.add("x")
    assert it.has_next() is True
    assert next(it) == "x"
    assert it.has_next() is False


def test_cursor_is_not_reset_by_iteration():
    it = Iterable(5)
    it.add(1)
    it.add(2)
    assert list(it) == [1, 2]
    assert list(it) == []


def test_next_past_end_raises_stop_iteration():
    it = Iterable(4)
    it.add("only")
    assert next(it) == "only"
    with pytest.raises(StopIteration):
        next(it)
    assert it.has_next() is False


def test_negative_capacity_raises():
    with pytest.raises(ValueError):
        Iterable(-1)


def test_main_output(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 12
    assert lines[-2:] == ["Hello", "World"]
    assert all(0 <= int(line) < 1024 for line in lines[:10])