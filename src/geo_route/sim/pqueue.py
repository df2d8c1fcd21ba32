# sim/pqueue.py
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class QueueEntry(Generic[T]):
    item: T
    priority: float


class PriorityQueue(Generic[T]):
    """
    Array-backed binary min-heap of (item, priority) entries.

    Pushing an item that is already queued adds a second entry; callers use
    this as a lazy decrease-key and discard stale entries on pop. Equal
    priorities are ordered by position in the heap only.
    """

    def __init__(self):
        self._data: list[QueueEntry[T]] = []

    def __len__(self) -> int:
        return len(self._data)

    def size(self) -> int:
        return len(self._data)

    def push(self, item: T, priority: float) -> None:
        self._data.append(QueueEntry(item, priority))
        self._sift_up(len(self._data) - 1)

    def pop(self) -> QueueEntry[T] | None:
        if not self._data:
            return None
        top = self._data[0]
        end = self._data.pop()
        if self._data:
            self._data[0] = end
            self._sift_down(0)
        return top

    def peek(self) -> QueueEntry[T] | None:
        return self._data[0] if self._data else None

    def _sift_up(self, n: int) -> None:
        d = self._data
        while n > 0:
            p = (n - 1) // 2
            if not d[n].priority < d[p].priority:
                break
            d[n], d[p] = d[p], d[n]
            n = p

    def _sift_down(self, idx: int) -> None:
        d, size = self._data, len(self._data)
        while True:
            left = 2 * idx + 1
            right = left + 1
            swap = None
            if left < size and d[left].priority < d[idx].priority:
                swap = left
            if right < size:
                rival = d[idx] if swap is None else d[left]
                if d[right].priority < rival.priority:
                    swap = right
            if swap is None:
                return
            d[idx], d[swap] = d[swap], d[idx]
            idx = swap
