from dataclasses import dataclass

from .graph import Graph
from .node import Node, State


@dataclass(frozen=True)
class Problem:
    """
    A search problem: find a path through ``state_space`` from ``initial_node`` to
    any node whose state is ``goal_state``.

    The initial node must belong to the state space. The goal state is not checked;
    searching for a state that is absent or unreachable simply fails.

    :field state_space: The graph to search.
    :field initial_node: The node the search starts from.
    :field goal_state: The state to reach.

    :raises NodeNotFoundError: If the initial node's state is not in the graph.
    """

    state_space: Graph
    initial_node: Node
    goal_state: State

    def __post_init__(self):
        self.state_space.get_node(self.initial_node.state)

    @classmethod
    def create(cls, state_space: Graph, initial_state: State, goal_state: State):
        """
        Create a problem from states rather than nodes.

        :param state_space: The graph to search.
        :param initial_state: The state to start from. Must be in the graph.
        :param goal_state: The state to reach.
        """
        return cls(state_space, state_space.get_node(initial_state), goal_state)
