from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fanalgo.queues import (
    ArrayQueue,
    ArrayQueueOfStrings,
    ArrayQueueOfStringsV2,
    LinkedQueueOfStrings,
)


def _fresh_queues():
    return [ArrayQueueOfStrings(), ArrayQueueOfStringsV2(), ArrayQueue(), LinkedQueueOfStrings()]


def _size(queue):
    if isinstance(queue, LinkedQueueOfStrings):
        return len(list(queue))
    return len(queue)


def test_new_queue_is_empty():
    for queue in [ArrayQueueOfStrings(), ArrayQueueOfStringsV2(), ArrayQueue()]:
        assert queue.is_empty() is True
        assert len(queue) == 0
    linked = LinkedQueueOfStrings()
    assert linked.is_empty() is True
    assert list(linked) == []


def test_dequeue_from_empty_raises():
    with pytest.raises(IndexError):
        ArrayQueueOfStrings().dequeue()
    with pytest.raises(IndexError):
        ArrayQueueOfStringsV2().dequeue()
    with pytest.raises(IndexError):
        ArrayQueue().dequeue()
    with pytest.raises(IndexError):
        LinkedQueueOfStrings().dequeue()


def test_fifo_order():
    words = ["to", "be", "or", "not"]
    for queue in [ArrayQueueOfStrings(), ArrayQueueOfStringsV2(), ArrayQueue(), LinkedQueueOfStrings()]:
        for word in words:
            queue.enqueue(word)
        assert queue.is_empty() is False
        assert [queue.dequeue() for _ in words] == words
        assert queue.is_empty() is True


def test_drain_then_reuse():
    for queue in [ArrayQueueOfStrings(), ArrayQueueOfStringsV2(), ArrayQueue(), LinkedQueueOfStrings()]:
        queue.enqueue("a")
        assert queue.dequeue() == "a"
        with pytest.raises(IndexError):
            queue.dequeue()
        queue.enqueue("b")
        queue.enqueue("c")
        assert queue.dequeue() == "b"
        assert queue.dequeue() == "c"


@given(
    steps=st.lists(
        st.tuples(st.text(max_size=3), st.integers(min_value=0, max_value=3)),
        max_size=60,
    )
)
def test_matches_deque_model(steps):
    for queue in _fresh_queues():
        model = deque()
        for value, pops in steps:
            queue.enqueue(value)
            model.append(value)
            for _ in range(min(pops, len(model))):
                assert queue.dequeue() == model.popleft()
            assert _size(queue) == len(model)
            assert queue.is_empty() == (len(model) == 0)
        while model:
            assert queue.dequeue() == model.popleft()
        with pytest.raises(IndexError):
            queue.dequeue()


def test_array_queue_holds_any_type():
    queue = ArrayQueue()
    values = [1, 2.5, None, ("x", 3)]
    for value in values:
        queue.enqueue(value)
    assert len(queue) == len(values)
    assert [queue.dequeue() for _ in values] == values


@given(st.lists(st.integers(), min_size=1, max_size=200))
def test_array_queue_grow_and_shrink(values):
    queue = ArrayQueue()
    for value in values:
        queue.enqueue(value)
    out = []
    while not queue.is_empty():
        out.append(queue.dequeue())
        assert len(queue) == len(values) - len(out)
    assert out == values


def test_linked_queue_iterates_front_to_back():
    queue = LinkedQueueOfStrings()
    for word in ["x", "y", "z"]:
        queue.enqueue(word)
    queue.dequeue()
    assert list(queue) == ["y", "z"]