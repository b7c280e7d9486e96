from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Mapping, Optional

from frozendict import frozendict

from .node import Node, State


class NodeNotFoundError(Exception):
    """
    Raised when a state is referenced that has no node in the graph.
    """

    def __init__(self, state: State):
        super().__init__(f"Could not find node with state: {state}")
        self.state = state


@dataclass(frozen=True, eq=True)
class Graph:
    """
    An undirected, weighted graph of nodes keyed by their state.

    Graphs are immutable. Every method that looks like a mutation returns a new
    graph, and graphs obtained earlier remain valid and unchanged.

    :field nodes: Mapping from each state to its node.
    """

    nodes: Mapping[State, Node] = field(default_factory=frozendict)

    def add_state(self, state: State) -> "Graph":
        """
        Produce a graph containing ``state``. If the state is already present, this
        graph is returned as is, so its edges and heuristic are kept.

        :param state: The state to add.
        """
        if state in self.nodes:
            return self
        return Graph(frozendict({**self.nodes, state: Node(state)}))

    def add_edge(self, source: State, destination: State, weight: float) -> "Graph":
        """
        Produce a graph with an undirected edge between ``source`` and ``destination``.
        Missing endpoints are created without edges, and any previous weight between
        the two states is overwritten in both directions.

        :param source: One endpoint of the edge.
        :param destination: The other endpoint of the edge.
        :param weight: The weight of the edge.
        """
        graph = self.add_state(source).add_state(destination)
        graph = graph.update_node(source, lambda n: n.with_edge(destination, weight))
        return graph.update_node(destination, lambda n: n.with_edge(source, weight))

    def update_node(self, state: State, update: Callable[[Node], Node]) -> "Graph":
        """
        Produce a graph where the node for ``state`` is replaced by ``update(node)``.

        :param state: The state whose node to replace.
        :param update: Function from the current node to its replacement.

        :raises NodeNotFoundError: If ``state`` is not in the graph.
        """
        node = self.get_node(state)
        return Graph(frozendict({**self.nodes, state: update(node)}))

    def update_heuristic(self, state: State, heuristic: float) -> "Graph":
        """
        Produce a graph where the node for ``state`` has the given heuristic.

        :raises NodeNotFoundError: If ``state`` is not in the graph.
        """
        return self.update_node(state, lambda n: n.with_heuristic(heuristic))

    def get_node(self, state: State) -> Node:
        """
        Get the node for the given state.

        :raises NodeNotFoundError: If ``state`` is not in the graph.
        """
        if state not in self.nodes:
            raise NodeNotFoundError(state)
        return self.nodes[state]

    def cost_between(self, first: Node, second: Node) -> Optional[float]:
        """
        The weight of the edge from ``first`` to ``second``, or None if the two nodes
        are not connected. Callers decide what a missing edge costs.
        """
        return self.get_node(first.state).edges.get(second.state)

    def expand_node(self, node: Node) -> List[Node]:
        """
        The neighbours of ``node``, resolved through this graph. They are returned in
        the iteration order of the node's edges, which carries no meaning; callers
        sort them as needed.
        """
        return [self.get_node(state) for state in node.edges]

    def states(self) -> Iterator[State]:
        """
        Iterate over every state in the graph.
        """
        return iter(self.nodes)

    def __contains__(self, state: State) -> bool:
        return state in self.nodes

    def __len__(self):
        return len(self.nodes)
