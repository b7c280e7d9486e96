from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Tuple

from graphsearch.state_space.path import Path
from graphsearch.state_space.problem import Problem

Fringe = Tuple[Path, ...]
ExpansionCallback = Callable[[Fringe], None]


class SearchStrategy(ABC):
    """
    A way of searching a ``Problem`` for a path to its goal.

    Every strategy has a ``name`` attribute, a human readable label.
    """

    name: str

    @abstractmethod
    def search(
        self, problem: Problem, on_expand: Optional[ExpansionCallback] = None
    ) -> bool:
        """
        Search the problem's state space for its goal state.

        :param problem: The problem to solve.
        :param on_expand: Called with the fringe once per step, before the head of the
            fringe is examined. The first call receives the fringe holding only the
            initial node. It observes the search and has no effect on it.

        :return: Whether the goal state was reached.
        """

    def annotate(self, path: Path) -> Any:
        """
        Value displayed next to ``path`` when showing the fringe of this strategy.
        """
        return ""
