"""
The named search strategies, each a configuration of ``Algorithm``.
"""

from graphsearch.state_space.node import Node
from graphsearch.state_space.path import Path

from .fringe import a_star_add, add_and_sort_by, add_to_back, add_to_front
from .general_search import Algorithm


def _cost(path: Path) -> float:
    return path.cost


def _heuristic(path: Path) -> float:
    return path.heuristic


def _eval(path: Path) -> float:
    return path.eval


def _by_heuristic(node: Node):
    """
    Order by heuristic, breaking ties by node order, i.e., by ascending state.
    """
    return (node.heuristic, node)


# uninformed


def depth_first() -> Algorithm:
    """
    Expands the deepest path first, trying neighbours in ascending order.
    """
    return Algorithm(
        name="Depth 1st search",
        add_to_fringe=add_to_front,
        ascending=True,
    )


def breadth_first() -> Algorithm:
    """
    Expands paths level by level.
    """
    return Algorithm(
        name="Breadth 1st search",
        add_to_fringe=add_to_back,
    )


def depth_limited(depth: int) -> Algorithm:
    """
    Depth-first search that does not expand paths with more than ``depth`` nodes
    past the root, i.e., it only reaches goals at most ``depth`` edges away.
    """
    return Algorithm(
        name=f"Depth-limited search (depth-limit = {depth})",
        add_to_fringe=add_to_front,
        ascending=True,
        depth_limit=depth,
    )


def uniform_cost() -> Algorithm:
    """
    Expands the cheapest path so far first.
    """
    return Algorithm(
        name="Uniform Search (Branch-and-bound)",
        add_to_fringe=add_and_sort_by(_cost),
        annotate=_cost,
    )


# informed


def greedy() -> Algorithm:
    """
    Expands the path whose frontier looks closest to the goal first.
    """
    return Algorithm(
        name="Greedy search",
        add_to_fringe=add_and_sort_by(_heuristic),
        annotate=_heuristic,
    )


def a_star() -> Algorithm:
    """
    Expands the path with the lowest cost plus heuristic first, keeping only the
    best known path to each node. Finds a cheapest path if the heuristic is
    admissible.
    """
    return Algorithm(
        name="A*",
        add_to_fringe=a_star_add,
        annotate=_eval,
    )


def beam(width: int) -> Algorithm:
    """
    Breadth-first search that keeps only the ``width`` paths with the lowest
    heuristic at each level.
    """
    return Algorithm(
        name=f"Beam search (w = {width})",
        add_to_fringe=add_to_back,
        width_limit=width,
        annotate=_heuristic,
    )


def hill_climbing() -> Algorithm:
    """
    Depth-first search that tries the neighbour with the lowest heuristic first. It
    still backtracks when a branch is exhausted.
    """
    return Algorithm(
        name="Hill climbing",
        add_to_fringe=add_to_front,
        expansion_order=_by_heuristic,
        ascending=True,
        annotate=_heuristic,
    )
