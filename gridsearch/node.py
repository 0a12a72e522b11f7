from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from gridsearch.grid import Coordinate


@dataclass
class Node:
    """
    Entry of the search tree.

    - index: slot of this node in its SearchTree
    - y, x: grid position
    - g: exact cost from the start
    - h: heuristic estimate to the goal
    - parent: index of the generating node, None for the root
    """
    index: int
    y: int
    x: int
    g: float
    h: float
    parent: Optional[int] = None

    @property
    def f(self) -> float:
        return self.g + self.h

    @property
    def position(self) -> Coordinate:
        return self.y, self.x


@dataclass
class SearchTree:
    """
    Arena owning every Node created by one search call.

    Parents are stored as indices into the arena. A node is always appended
    after its parent, so parent indices are strictly smaller than the child's
    and the links cannot form a cycle.
    """
    nodes: List[Node] = field(default_factory=list)

    def add(self, y: int, x: int, g: float, h: float, parent: Optional[int] = None) -> Node:
        if parent is not None and not 0 <= parent < len(self.nodes):
            raise IndexError(f"parent index {parent} is not in the tree")
        node = Node(len(self.nodes), y, x, g, h, parent)
        self.nodes.append(node)
        return node

    def parent_of(self, node: Node) -> Optional[Node]:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def lineage(self, index: int) -> Iterator[Node]:
        """Yield the node at `index` followed by each ancestor up to the root."""
        node: Optional[Node] = self.nodes[index]
        while node is not None:
            yield node
            node = self.parent_of(node)

    def __getitem__(self, index: int) -> Node:
        return self.nodes[index]

    def __len__(self) -> int:
        return len(self.nodes)
