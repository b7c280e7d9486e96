from dataclasses import dataclass, field, replace
from functools import total_ordering
from typing import Hashable, Mapping

from frozendict import frozendict

State = Hashable


class StateMismatchError(Exception):
    """
    Raised when two states that cannot be ordered against each other are compared,
    e.g., a string label and an integer label in the same graph.
    """

    def __init__(self, first, second):
        super().__init__(f"{first} {second}")
        self.first = first
        self.second = second


@total_ordering
@dataclass(frozen=True, eq=True)
class Node:
    """
    A state in the state space, together with its outgoing edges and a heuristic
    estimate of the remaining cost to the goal.

    Nodes order by state first and heuristic second.

    :field state: The state this node represents.
    :field edges: Mapping from neighbouring states to the weight of the edge.
    :field heuristic: Estimated cost from this node to the goal. Defaults to 0,
        which is admissible for any graph.
    """

    state: State
    edges: Mapping[State, float] = field(default_factory=frozendict)
    heuristic: float = 0.0

    def with_edge(self, state: State, weight: float) -> "Node":
        """
        Produce a copy of this node with an edge to ``state``. An existing edge to the
        same state is overwritten. This node is not modified.

        :param state: The neighbouring state.
        :param weight: The weight of the edge.
        """
        return replace(self, edges=frozendict({**self.edges, state: weight}))

    def with_heuristic(self, heuristic: float) -> "Node":
        """
        Produce a copy of this node with the given heuristic.
        """
        return replace(self, heuristic=heuristic)

    def __lt__(self, other: "Node") -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        try:
            if self.state != other.state:
                return self.state < other.state
        except TypeError as e:
            raise StateMismatchError(self.state, other.state) from e
        return self.heuristic < other.heuristic

    def __str__(self):
        return str(self.state)
