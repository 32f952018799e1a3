from __future__ import annotations
import heapq
from typing import Generic, List, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Min-priority queue over (weight, sequence, payload) triples.
    Equal weights leave in insertion order, so anything built from it is
    reproducible. Payloads are never compared.
    """
    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, T]] = []
        self._seq = 0

    # -------- API --------
    def insert(self, weight: int, payload: T) -> int:
        """Add payload; returns the sequence number it was given."""
        seq = self._seq
        self._seq += 1
        heapq.heappush(self._heap, (weight, seq, payload))
        return seq

    def extract_min(self) -> Tuple[int, int, T]:
        if not self._heap:
            raise IndexError("extract_min from an empty PriorityQueue")
        return heapq.heappop(self._heap)

    def peek(self) -> Tuple[int, int, T]:
        if not self._heap:
            raise IndexError("peek into an empty PriorityQueue")
        return self._heap[0]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
