"""
Policies for inserting a new path into the fringe. Each takes the current fringe and
the new path and returns a new fringe; the fringe passed in is never modified.
"""

from typing import Callable, Optional

from graphsearch.state_space.path import Path

from .search_strategy import Fringe


def add_to_front(fringe: Fringe, path: Path) -> Fringe:
    """
    Put the new path at the head of the fringe (a stack).
    """
    return (path,) + fringe


def add_to_back(fringe: Fringe, path: Path) -> Fringe:
    """
    Put the new path at the tail of the fringe (a queue).
    """
    return fringe + (path,)


def add_and_sort_by(key: Callable[[Path], float]) -> Callable[[Fringe, Path], Fringe]:
    """
    Produce a policy that appends the new path and then sorts the whole fringe by
    ``key``. Ties are broken by the total order on paths, so the result does not
    depend on the order paths were inserted in.

    :param key: The value to rank paths by, lowest first.
    """

    def add(fringe: Fringe, path: Path) -> Fringe:
        return tuple(sorted(add_to_back(fringe, path), key=lambda p: (key(p), p)))

    return add


def find_alternate_path(fringe: Fringe, path: Path) -> Optional[Path]:
    """
    The first path in the fringe that ends at the same node as ``path``, or None.
    """
    for other in fringe:
        if other.end == path.end:
            return other
    return None


_add_by_eval = add_and_sort_by(lambda p: p.eval)


def a_star_add(fringe: Fringe, path: Path) -> Fringe:
    """
    Insert a path ranked by cost plus heuristic, keeping at most one path to each
    node. If the fringe already reaches the same node more cheaply, the new path is
    dropped; otherwise the existing path is replaced by the new one.
    """
    alternate = find_alternate_path(fringe, path)
    if alternate is not None:
        if alternate.eval < path.eval:
            return fringe
        index = fringe.index(alternate)
        fringe = fringe[:index] + fringe[index + 1 :]
    return _add_by_eval(fringe, path)
