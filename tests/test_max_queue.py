import random
from collections import deque

import pytest

from algokit.max_queue import MaxQueue


def test_fifo_order():
    queue = MaxQueue()
    for value in [5, 1, 4]:
        queue.push(value)
    assert [queue.pop() for _ in range(3)] == [5, 1, 4]
    assert len(queue) == 0


def test_max_tracks_random_operations():
    rng = random.Random(3)
    queue = MaxQueue()
    model = deque()
    for _ in range(500):
        if model and rng.random() < 0.45:
            assert queue.pop() == model.popleft()
        else:
            value = rng.randint(-50, 50)
            queue.push(value)
            model.append(value)
        assert len(queue) == len(model)
        if model:
            assert queue.get_max() == max(model)


def test_max_after_largest_leaves():
    queue = MaxQueue()
    for value in [9, 2, 7]:
        queue.push(value)
    queue.pop()
    assert queue.get_max() == 7


def test_empty_queue_errors():
    queue = MaxQueue()
    with pytest.raises(IndexError):
        queue.pop()
    with pytest.raises(IndexError):
        queue.get_max()