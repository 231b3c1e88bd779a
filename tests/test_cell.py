import queue
import threading

import pytest

from ibag.cell import ThreadCell
from ibag.errors import FailTakeOwnership, IBagError, InvalidThreadAccess


def _in_thread(func):
    result = {}

    def target():
        try:
            result["value"] = func()
        except BaseException as exc:  # noqa: BLE001
            result["error"] = exc

    thread = threading.Thread(target=target)
    thread.start()
    thread.join()
    if "error" in result:
        raise result["error"]
    return result.get("value")


def test_basic():
    cell = ThreadCell(True, False)
    assert str(cell) == "True"
    assert cell.get() is True
    assert cell.is_valid() is True
    with pytest.raises(InvalidThreadAccess):
        _in_thread(cell.get)


def test_is_valid_false_elsewhere():
    cell = ThreadCell(42, False)
    assert _in_thread(cell.is_valid) is False


def test_mut():
    cell = ThreadCell(True, False)
    cell.set(False)
    assert str(cell) == "False"
    assert cell.get() is False


def test_set_from_other_thread_fails():
    cell = ThreadCell(1, False)
    with pytest.raises(InvalidThreadAccess):
        _in_thread(lambda: cell.set(2))
    assert cell.get() == 1


def test_basic_usage():
    cell = ThreadCell(42, False)
    assert cell.get() == 42
    with pytest.raises(InvalidThreadAccess):
        _in_thread(cell.get)


def test_ownership_transfer():
    cell = ThreadCell("test", False)

    def work():
        assert cell.take_ownership() is True
        return cell.get()

    assert _in_thread(work) == "test"
    with pytest.raises(InvalidThreadAccess):
        cell.get()


def test_frozen_cell():
    cell = ThreadCell(True, True)
    with pytest.raises(FailTakeOwnership):
        _in_thread(cell.take_ownership)
    assert cell.get() is True


def test_take_ownership_only_once():
    cell = ThreadCell(5, False)
    assert cell.take_ownership() is True
    with pytest.raises(FailTakeOwnership):
        _in_thread(cell.take_ownership)
    assert cell.get() == 5


def test_rc_sending():
    cell = ThreadCell([True], False)
    channel = queue.Queue()

    def sender():
        channel.put(cell)
        return cell.is_valid()

    assert _in_thread(sender) is False
    with pytest.raises(InvalidThreadAccess):
        _in_thread(cell.get)
    received = channel.get()
    value = received.get()
    assert value == [True]


def test_rc_sending_take_ownership():
    cell = ThreadCell([True], False)
    channel = queue.Queue()

    def sender():
        channel.put(cell)
        return cell.is_valid()

    def receiver():
        received = channel.get()
        return received.take_ownership(), received.get()

    assert _in_thread(sender) is False
    taken, value = _in_thread(receiver)
    assert taken is True
    assert value == [True]
    with pytest.raises(InvalidThreadAccess):
        cell.get()


def test_into_inner_on_owner():
    cell = ThreadCell(42, False)
    assert cell.into_inner() == 42
    with pytest.raises(IBagError):
        cell.get()


def test_into_inner_from_other_thread_fails():
    cell = ThreadCell(42, False)
    with pytest.raises(InvalidThreadAccess):
        _in_thread(cell.into_inner)
    assert cell.get() == 42


def test_clone_copies_value_and_is_unfrozen():
    original = ThreadCell([1, 2], True)
    duplicate = original.clone()
    assert duplicate == original
    duplicate.get().append(3)
    assert original.get() == [1, 2]
    assert _in_thread(duplicate.take_ownership) is True


def test_equality_and_ordering():
    assert ThreadCell(1, False) == ThreadCell(1, False)
    assert ThreadCell(1, False) != ThreadCell(2, False)
    assert ThreadCell(1, False) < ThreadCell(2, False)
    assert ThreadCell(3, False) >= ThreadCell(2, False)
    assert sorted([ThreadCell(3), ThreadCell(1), ThreadCell(2)]) == [
        ThreadCell(1),
        ThreadCell(2),
        ThreadCell(3),
    ]


def test_compare_from_other_thread_fails():
    a = ThreadCell(1, False)
    b = ThreadCell(1, False)
    with pytest.raises(InvalidThreadAccess) as info:
        _in_thread(lambda: a == b)
    assert type(info.value) is InvalidThreadAccess
    assert (a == b) is True


def test_repr_owner_and_foreign():
    cell = ThreadCell(42, False)
    assert repr(cell) == "ThreadCell(value=42)"
    assert _in_thread(lambda: repr(cell)) == "ThreadCell(value=<invalid thread>)"


def test_default_freeze_is_false():
    cell = ThreadCell("x")
    assert _in_thread(cell.take_ownership) is True