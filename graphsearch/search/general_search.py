from dataclasses import dataclass
from typing import Any, Callable, Optional

from graphsearch.state_space.node import Node
from graphsearch.state_space.path import Path
from graphsearch.state_space.problem import Problem

from .search_strategy import ExpansionCallback, Fringe, SearchStrategy

# cost charged for stepping to a child that has no recorded edge from its parent
MISSING_EDGE_COST = 0.0


def _no_annotation(path: Path) -> Any:
    """No annotation: paths are shown bare."""
    return ""


def _natural_order(node: Node) -> Node:
    """Order nodes by state."""
    return node


@dataclass(frozen=True)
class Algorithm(SearchStrategy):
    """
    General search. Every strategy in this package is an instance of this class,
    differing only in how children are ordered, how new paths enter the fringe, and
    which limits apply.

    Children of the expanded path are sorted against ``expansion_order`` and then
    folded into the fringe one at a time. With a policy that prepends, this makes
    ``expansion_order`` the order in which the children are subsequently popped.

    :param name: Human readable name of the strategy.
    :param add_to_fringe: Function from the fringe and a new path to the new fringe.
    :param expansion_order: Sort key applied to the children of an expanded node.
    :param ascending: Direction of ``expansion_order``. Policies that append
        reverse this, so e.g. breadth-first search declares a descending order.
    :param depth_limit: If set, paths longer than this are not expanded.
    :param width_limit: If set, whenever every path in the fringe has the same
        length and there are more than ``width_limit`` of them, only the
        ``width_limit`` paths with the lowest heuristic are kept.
    :param annotate: Value shown next to each path when the fringe is displayed,
        e.g. the quantity the fringe is sorted by.
    """

    name: str
    add_to_fringe: Callable[[Fringe, Path], Fringe]
    expansion_order: Callable[[Node], Any] = _natural_order
    ascending: bool = False
    depth_limit: Optional[int] = None
    width_limit: Optional[int] = None
    annotate: Callable[[Path], Any] = _no_annotation

    def __post_init__(self):
        assert self.depth_limit is None or self.depth_limit >= 0
        assert self.width_limit is None or self.width_limit > 0

    def search(
        self, problem: Problem, on_expand: Optional[ExpansionCallback] = None
    ) -> bool:
        fringe: Fringe = (Path.root(problem.initial_node),)
        while fringe:
            if on_expand is not None:
                on_expand(fringe)
            path, rest = fringe[0], fringe[1:]
            if path.end.state == problem.goal_state:
                return True
            fringe = self._expand(problem, path, rest)
        return False

    def _expand(self, problem: Problem, path: Path, rest: Fringe) -> Fringe:
        fringe = rest
        if not self._at_depth_limit(path):
            for child in self._children(problem, path):
                cost = problem.state_space.cost_between(path.end, child)
                if cost is None:
                    cost = MISSING_EDGE_COST
                fringe = self.add_to_fringe(fringe, path.add_node(child, cost))
        if self._over_width_limit(fringe):
            fringe = self._prune(fringe)
        return fringe

    def _children(self, problem: Problem, path: Path):
        children = [
            child
            for child in problem.state_space.expand_node(path.end)
            if not path.did_visit(child)
        ]
        # sorted against the declared order, since folding reverses it
        return sorted(children, key=self.expansion_order, reverse=self.ascending)

    def _at_depth_limit(self, path: Path) -> bool:
        return self.depth_limit is not None and path.length > self.depth_limit

    def _over_width_limit(self, fringe: Fringe) -> bool:
        if self.width_limit is None or len(fringe) <= self.width_limit:
            return False
        # only prune once a whole level of the search tree is on the fringe
        return len({path.length for path in fringe}) == 1

    def _prune(self, fringe: Fringe) -> Fringe:
        cutoff = sorted(path.heuristic for path in fringe)[self.width_limit - 1]
        kept = tuple(path for path in fringe if path.heuristic <= cutoff)
        return kept[: self.width_limit]
