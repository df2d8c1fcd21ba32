# tests/sim/test_pqueue.py
import numpy as np

from geo_route.sim.pqueue import PriorityQueue, QueueEntry


def _heap_ok(pq: PriorityQueue) -> bool:
    d = pq._data
    return all(d[(i - 1) // 2].priority <= d[i].priority for i in range(1, len(d)))


def test_empty_pop_returns_none():
    pq = PriorityQueue()
    assert pq.pop() is None
    assert pq.size() == 0


def test_pops_in_priority_order():
    pq = PriorityQueue()
    for item, pr in [("c", 3.0), ("a", 1.0), ("e", 5.0), ("b", 2.0), ("d", 4.0)]:
        pq.push(item, pr)
    out = []
    while (top := pq.pop()) is not None:
        out.append(top.item)
    assert out == ["a", "b", "c", "d", "e"]


def test_duplicate_items_are_kept():
    pq = PriorityQueue()
    pq.push("B", 10.0)
    pq.push("B", 2.0)
    assert pq.size() == 2
    assert pq.pop() == QueueEntry("B", 2.0)
    assert pq.pop() == QueueEntry("B", 10.0)


def test_random_interleaving_keeps_minimum_and_size():
    rng = np.random.default_rng(7)
    pq = PriorityQueue()
    shadow: list[float] = []
    for step in range(500):
        if shadow and rng.random() < 0.4:
            before = pq.size()
            top = pq.pop()
            assert top.priority == min(shadow)
            shadow.remove(top.priority)
            assert pq.size() == before - 1
        else:
            pr = float(rng.integers(0, 50))  # many ties
            before = pq.size()
            pq.push(step, pr)
            shadow.append(pr)
            assert pq.size() == before + 1
        assert _heap_ok(pq)
    assert len(pq) == len(shadow)


def test_peek_does_not_remove():
    pq = PriorityQueue()
    pq.push("x", 1.5)
    assert pq.peek() == QueueEntry("x", 1.5)
    assert pq.size() == 1
