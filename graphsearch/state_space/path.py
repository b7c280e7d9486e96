from dataclasses import dataclass
from functools import total_ordering
from typing import Tuple

from .node import Node


@total_ordering
@dataclass(frozen=True, eq=True)
class Path:
    """
    A path through the state space, stored from the frontier back to the root.

    Paths are ordered by cost, then by frontier node, then by length, and finally by
    their string form. This is a total order, and it is used to break ties whenever
    a fringe is sorted.

    :field nodes: The nodes on the path, frontier first and root last. Never empty.
    :field cost: The total weight of the edges traversed from the root.
    """

    nodes: Tuple[Node, ...]
    cost: float

    def __post_init__(self):
        assert self.nodes, "A path must contain at least one node"

    @classmethod
    def root(cls, node: Node) -> "Path":
        """
        The path containing only ``node``, at no cost.
        """
        return cls((node,), 0.0)

    @property
    def length(self) -> int:
        return len(self.nodes)

    @property
    def end(self) -> Node:
        """
        The frontier node, i.e., the one that is expanded next.
        """
        return self.nodes[0]

    @property
    def heuristic(self) -> float:
        return self.end.heuristic

    @property
    def eval(self) -> float:
        """
        The cost so far plus the heuristic estimate of the cost remaining.
        """
        return self.cost + self.heuristic

    def add_node(self, node: Node, edge_cost: float) -> "Path":
        """
        Produce the path extended by ``node`` through an edge of weight ``edge_cost``.
        This path is not modified.
        """
        return Path((node,) + self.nodes, self.cost + edge_cost)

    def did_visit(self, node: Node) -> bool:
        """
        Whether ``node`` is anywhere on this path.
        """
        return node in self.nodes

    def _order_key(self):
        return (self.cost, self.end, self.length, str(self))

    def __lt__(self, other: "Path") -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._order_key() < other._order_key()

    def __str__(self):
        return "<" + ",".join(str(node.state) for node in self.nodes) + ">"
