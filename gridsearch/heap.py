import heapq
import itertools
from typing import List, Tuple

from gridsearch.exceptions import EmptyQueueError
from gridsearch.node import Node


class MinHeap:
    """
    Priority queue of Nodes ordered by f = g + h.

    Ties between equal f values are broken first-in first-out: entries carry
    an insertion sequence number as the second sort key. Which of several
    optimal paths gets returned depends on this order, the optimal cost does
    not.

    The heap counts its own inserts and extractions in `operations`.
    """

    def __init__(self):
        self._entries: List[Tuple[float, int, Node]] = []
        self._sequence = itertools.count()
        self.operations = 0

    def insert(self, node: Node) -> None:
        heapq.heappush(self._entries, (node.f, next(self._sequence), node))
        self.operations += 1

    def extract_min(self) -> Node:
        if not self._entries:
            raise EmptyQueueError("extract_min() called on an empty heap")
        _, _, node = heapq.heappop(self._entries)
        self.operations += 1
        return node

    def peek(self) -> Node:
        if not self._entries:
            raise EmptyQueueError("peek() called on an empty heap")
        return self._entries[0][2]

    def is_empty(self) -> bool:
        return not self._entries

    def __len__(self) -> int:
        return len(self._entries)
