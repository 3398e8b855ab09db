import pytest

from dsbasics.linked_lists import DoublyLinkedList, SinglyLinkedList


def test_singly_example_session():
    airports = SinglyLinkedList()
    assert airports.is_empty()
    airports.add_front("BOS")
    assert str(airports) == "BOS - NULL"
    assert not airports.is_empty()
    airports.add_front("ATL")
    airports.add_front("MSP")
    airports.add_front("LAX")
    assert str(airports) == "LAX - MSP - ATL - BOS - NULL"
    assert airports.front() == "LAX"
    assert airports.remove_front() == "LAX"
    assert airports.front() == "MSP"
    assert str(airports) == "MSP - ATL - BOS - NULL"


def test_singly_empty_string():
    assert str(SinglyLinkedList()) == "NULL"


def test_singly_items_keep_order():
    items = ["a", "b", "c"]
    linked = SinglyLinkedList(items)
    assert list(linked) == items
    assert len(linked) == len(items)
    assert linked.front() == items[0]


def test_singly_empty_errors():
    linked = SinglyLinkedList()
    with pytest.raises(IndexError):
        linked.front()
    with pytest.raises(IndexError):
        linked.remove_front()


def test_singly_drain():
    items = ["x", "y", "z"]
    linked = SinglyLinkedList(items)
    drained = [linked.remove_front() for _ in items]
    assert drained == items
    assert linked.is_empty()
    assert len(linked) == 0


def test_doubly_example_session():
    airports = DoublyLinkedList()
    airports.add_front("SFO")
    assert str(airports) == "SFO - NULL"
    airports.add_front("PVD")
    airports.add_front("JFK")
    assert str(airports) == "JFK - PVD - SFO - NULL"
    assert airports.front() == "JFK"
    assert airports.back() == "SFO"


def test_doubly_both_ends():
    linked = DoublyLinkedList(["b"])
    linked.add_front("a")
    linked.add_back("c")
    assert list(linked) == ["a", "b", "c"]
    assert linked.remove_back() == "c"
    assert linked.remove_front() == "a"
    assert list(linked) == ["b"]
    assert linked.front() == linked.back() == "b"


def test_doubly_len_and_empty():
    items = ["p", "q", "r", "s"]
    linked = DoublyLinkedList(items)
    assert len(linked) == len(items)
    for _ in items:
        linked.remove_back()
    assert linked.is_empty()
    assert list(linked) == []


def test_doubly_empty_errors():
    linked = DoublyLinkedList()
    for operation in (linked.front, linked.back, linked.remove_front, linked.remove_back):
        with pytest.raises(IndexError):
            operation()