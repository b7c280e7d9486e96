from typing import Any, Callable

from graphsearch.search.search_strategy import Fringe
from graphsearch.state_space.path import Path


def render_path(path: Path, annotate: Callable[[Path], Any]) -> str:
    """
    Render a path as ``<tag><G,A,S>``, where the tag is ``annotate(path)``.
    """
    return f"{annotate(path)}{path}"


def render_fringe(fringe: Fringe, annotate: Callable[[Path], Any]) -> str:
    """
    Render every path in the fringe, e.g. ``[2.0<A,S> 10.0<G,S>]``.
    """
    return "[" + " ".join(render_path(path, annotate) for path in fringe) + "]"


def render_expansion(fringe: Fringe, annotate: Callable[[Path], Any]) -> str:
    """
    Render one step of a search: the state about to be expanded, then the fringe.
    """
    return f"      {fringe[0].end}      {render_fringe(fringe, annotate)}"
