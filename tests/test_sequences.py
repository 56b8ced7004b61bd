from dataclasses import dataclass

import pytest

from dsalgo.sequences import DynamicArray, LinkedList, search_speed


@dataclass
class Person:
    name: str
    age: int


KINDS = ["dynamic_array", "linked_list"]


@pytest.mark.parametrize("kind", KINDS)
def test_int_operations(kind):
    coll = DynamicArray() if kind == "dynamic_array" else LinkedList()
    for value in [23, 4, 11, 4, 7, 8]:
        coll.insert_at_end(value)
    assert len(coll) == 6
    assert coll.get(2) == 11
    assert coll.find(7) == 4
    coll.remove_at_beginning()
    assert coll.get(0) == 4
    assert len(coll) == 5
    for i in range(100):
        coll.insert(i, 3)
    assert coll.get(1) == 11
    assert coll.get(3) == 99
    assert coll.get(102) == 0
    assert len(coll) == 105
    coll.remove_at_end()
    assert len(coll) == 104
    assert coll.get(103) == 7
    assert coll.get(0) == 4
    assert 50 in coll
    coll.remove(50)
    assert 50 not in coll
    assert len(coll) == 103
    coll.insert_at_beginning(1023)
    coll.insert_at_beginning(4324)
    assert 4678 not in coll
    assert 1023 in coll
    assert len(coll) == 105
    assert coll.get(0) == 4324


@pytest.mark.parametrize("kind", KINDS)
def test_string_operations(kind):
    coll = DynamicArray() if kind == "dynamic_array" else LinkedList()
    for text in ["hi", "b", "d", "wo", "t", "e"]:
        coll.insert_at_end(text)
    assert len(coll) == 6
    assert coll.get(2) == "d"
    assert coll.find("t") == 4
    coll.remove_at_beginning()
    assert coll.get(0) == "b"
    assert len(coll) == 5
    for i in range(100):
        coll.insert("A" * i, 3)
    assert coll.get(1) == "d"
    assert coll.get(3) == "A" * 99
    assert coll.get(102) == ""
    assert len(coll) == 105
    coll.remove_at_end()
    assert len(coll) == 104
    assert coll.get(103) == "t"
    assert coll.get(0) == "b"
    assert "AAAA" in coll
    coll.remove("AAAAAAA")
    assert "AAAAAAA" not in coll
    assert len(coll) == 103
    coll.insert_at_beginning("Bob")
    coll.insert_at_beginning("Mary")
    assert "Sanford" not in coll
    assert "Bob" in coll
    assert len(coll) == 105
    assert coll.get(0) == "Mary"


@pytest.mark.parametrize("kind", KINDS)
def test_person_operations(kind):
    coll = DynamicArray() if kind == "dynamic_array" else LinkedList()
    for person in [Person("Drew", 65), Person("Ellen", 66)]:
        coll.insert_at_end(person)
    assert len(coll) == 2
    assert coll.get(1).age == 66
    assert coll.find(Person("Drew", 65)) == 0
    coll.remove_at_beginning()
    assert coll.get(0) == Person("Ellen", 66)
    assert len(coll) == 1
    for _ in range(100):
        coll.insert(Person("Clone", 18), 1)
    assert coll.get(1).name == "Clone"
    assert coll.get(3) == Person("Clone", 18)
    assert coll.get(100) == Person("Clone", 18)
    assert len(coll) == 101
    coll.remove_at_end()
    assert len(coll) == 100
    assert coll.get(99) == Person("Clone", 18)
    assert coll.get(0) == Person("Ellen", 66)
    assert Person("Ellen", 66) in coll
    assert Person("Clone", 18) in coll
    coll.remove(Person("Ellen", 66))
    assert Person("Ellen", 66) not in coll
    assert len(coll) == 99
    coll.insert_at_beginning(Person("Matteo", 23))
    coll.insert_at_beginning(Person("Sarah", 33))
    assert Person("Drew", 65) not in coll
    assert Person("Matteo", 23) in coll
    assert len(coll) == 101
    assert coll.get(0) == Person("Sarah", 33)


def test_capacity_growth_and_truncation():
    array = DynamicArray(5)
    assert array.capacity == 5
    for i in range(10):
        array.insert_at_end(i)
    assert array.capacity == 10
    array.insert_at_end(10)
    assert array.capacity == 20
    array.set_capacity(3)
    assert array.capacity == 3
    assert len(array) == 3
    assert array[2] == 2


def test_default_capacity():
    assert DynamicArray().capacity == 10


def test_zero_capacity_grows_on_insert():
    array = DynamicArray(0)
    array.insert_at_end("x")
    assert array.capacity >= 1
    assert array.get(0) == "x"


@pytest.mark.parametrize("bad", [-1, -5])
def test_negative_capacity_rejected(bad):
    with pytest.raises(ValueError):
        DynamicArray(bad)
    with pytest.raises(ValueError):
        DynamicArray().set_capacity(bad)


@pytest.mark.parametrize("kind", KINDS)
def test_get_out_of_range(kind):
    coll = DynamicArray() if kind == "dynamic_array" else LinkedList()
    coll.insert_at_end(1)
    assert coll.get(0) == 1
    with pytest.raises(IndexError):
        coll.get(1)
    with pytest.raises(IndexError):
        coll.get(-1)


@pytest.mark.parametrize("kind", KINDS)
def test_insert_out_of_range(kind):
    coll = DynamicArray() if kind == "dynamic_array" else LinkedList()
    with pytest.raises(IndexError):
        coll.insert(5, 1)
    assert len(coll) == 0


@pytest.mark.parametrize("kind", KINDS)
def test_remove_from_empty(kind):
    coll = DynamicArray() if kind == "dynamic_array" else LinkedList()
    with pytest.raises(IndexError):
        coll.remove_at_beginning()
    with pytest.raises(IndexError):
        coll.remove_at_end()
    with pytest.raises(IndexError):
        coll.remove_at(0)
    assert len(coll) == 0


@pytest.mark.parametrize("kind", KINDS)
def test_remove_missing_item_is_noop(kind):
    coll = DynamicArray() if kind == "dynamic_array" else LinkedList()
    for value in [1, 2, 3]:
        coll.insert_at_end(value)
    coll.remove(42)
    assert list(coll) == [1, 2, 3]
    assert coll.find(42) == -1


@pytest.mark.parametrize("kind", KINDS)
def test_iteration_matches_insertion_order(kind):
    coll = DynamicArray() if kind == "dynamic_array" else LinkedList()
    values = ["a", "b", "c", "d"]
    for value in values:
        coll.insert_at_end(value)
    assert list(coll) == values
    coll.remove_at(2)
    assert list(coll) == ["a", "b", "d"]


def test_linked_list_tail_after_emptying():
    linked = LinkedList()
    linked.insert_at_end(1)
    linked.remove_at_end()
    assert len(linked) == 0
    linked.insert_at_end(2)
    linked.insert_at_end(3)
    assert list(linked) == [2, 3]


def test_search_speed_returns_nonnegative_ints():
    linked_speed, array_speed = search_speed(100, 10)
    assert isinstance(linked_speed, int) and linked_speed >= 0
    assert isinstance(array_speed, int) and array_speed >= 0


def test_search_speed_rejects_zero_tests():
    with pytest.raises(ValueError):
        search_speed(10, 0)