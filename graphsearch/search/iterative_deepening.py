import itertools
from dataclasses import dataclass
from typing import Callable, Optional

from graphsearch.state_space.problem import Problem

from .search_strategy import ExpansionCallback, SearchStrategy
from .strategies import depth_limited


@dataclass(frozen=True)
class IterativeDeepening(SearchStrategy):
    """
    Repeats depth-limited search with limits 0, 1, 2, ... until the goal is found.

    Without ``max_depth`` there is no upper bound on the limit, so searching for a
    goal that cannot be reached never terminates.

    :param max_depth: If set, the largest limit tried before giving up.
    """

    max_depth: Optional[int] = None

    name = "Iterative deepening search"

    def __post_init__(self):
        assert self.max_depth is None or self.max_depth >= 0

    def search(
        self,
        problem: Problem,
        on_expand: Optional[ExpansionCallback] = None,
        on_deepen: Optional[Callable[[int], None]] = None,
        after_round: Optional[Callable[[int], None]] = None,
    ) -> bool:
        """
        See ``SearchStrategy.search``. ``on_expand`` is forwarded to every round.

        :param on_deepen: Called with the depth limit before each round starts.
        :param after_round: Called with the depth limit after each round ends,
            including the round that reaches the goal.
        """
        if self.max_depth is None:
            limits = itertools.count()
        else:
            limits = range(self.max_depth + 1)
        for limit in limits:
            if on_deepen is not None:
                on_deepen(limit)
            success = depth_limited(limit).search(problem, on_expand)
            if after_round is not None:
                after_round(limit)
            if success:
                return True
        return False


def iterative_deepening(max_depth: Optional[int] = None) -> IterativeDeepening:
    """
    See ``IterativeDeepening``.
    """
    return IterativeDeepening(max_depth)
