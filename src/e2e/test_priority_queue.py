# src/e2e/test_priority_queue.py

import pytest

from fingers.priority_queue import PriorityQueue


def test_extracts_lowest_weight_first():
    pq = PriorityQueue()
    for weight, item in [(3, "Clear drains"), (6, "drink tea"), (5, "Make tea"),
                         (4, "Feed cat"), (7, "eat biscuit"), (2, "Tax return"),
                         (1, "Solve RC tasks")]:
        pq.insert(weight, item)

    out = []
    while pq:
        out.append(pq.extract_min()[2])

    assert out == [
        "Solve RC tasks",
        "Tax return",
        "Clear drains",
        "Feed cat",
        "Make tea",
        "drink tea",
        "eat biscuit",
    ]


def test_equal_weights_leave_in_insertion_order():
    pq = PriorityQueue()
    for item in "abcde":
        pq.insert(1, item)
    pq.insert(0, "z")
    assert [pq.extract_min()[2] for _ in range(6)] == ["z", "a", "b", "c", "d", "e"]


def test_insert_returns_increasing_sequence_numbers():
    pq = PriorityQueue()
    seqs = [pq.insert(5, object()) for _ in range(3)]
    assert seqs == [0, 1, 2]
    assert pq.peek()[1] == 0
    assert len(pq) == 3


def test_payloads_are_never_compared():
    class Opaque:
        pass

    pq = PriorityQueue()
    pq.insert(1, Opaque())
    pq.insert(1, Opaque())  # would raise TypeError if payloads were compared
    assert len(pq) == 2


def test_empty_queue_raises():
    pq = PriorityQueue()
    assert not pq
    with pytest.raises(IndexError):
        pq.extract_min()
    with pytest.raises(IndexError):
        pq.peek()
