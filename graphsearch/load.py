"""
Reading graphs from text.

A graph file lists one edge per line as ``<source> <destination> <weight>``,
followed by a line containing only ``#####`` and then one heuristic per line as
``<state> <heuristic>``. The separator and heuristic section may be omitted.
Tokens are separated by exactly one space.
"""

from typing import Callable, Iterable, List, Optional, Tuple

from graphsearch.state_space.graph import Graph, NodeNotFoundError
from graphsearch.state_space.node import State
from graphsearch.utils.documentation import internal_only

SEPARATOR = "#####"


class StateFormatError(Exception):
    """
    Raised when a state cannot be parsed from text.
    """

    def __init__(self, text: str):
        super().__init__(f"Could not parse state from text: {text}")
        self.text = text


class GraphFormatError(Exception):
    """
    Raised when a line of a graph file is malformed.
    """


def parse_letter_state(text: str) -> str:
    """
    Parse a state written as a single character, e.g. ``S``.

    :raises StateFormatError: If ``text`` is not exactly one character.
    """
    if len(text) != 1:
        raise StateFormatError(text)
    return text


@internal_only
def separate_lines(lines: List[str]) -> Tuple[List[str], List[str]]:
    """
    Split lines into those before the separator and those after it.
    """
    if SEPARATOR not in lines:
        return lines, []
    index = lines.index(SEPARATOR)
    return lines[:index], lines[index + 1 :]


def parse_edge(
    line: str, parse_state: Callable[[str], State] = parse_letter_state
) -> Tuple[State, State, float]:
    """
    Parse an edge line of the form ``<source> <destination> <weight>``.

    :raises GraphFormatError: If the line is malformed or the weight is negative.
    """
    tokens = line.split(" ")
    try:
        edge = parse_state(tokens[0]), parse_state(tokens[1]), float(tokens[2])
    except (IndexError, ValueError, StateFormatError) as e:
        raise GraphFormatError(f"Could not parse edge: {line}") from e
    if edge[2] < 0:
        raise GraphFormatError(f"Could not parse edge: {line}")
    return edge


def parse_heuristic(
    line: str, parse_state: Callable[[str], State] = parse_letter_state
) -> Tuple[State, float]:
    """
    Parse a heuristic line of the form ``<state> <heuristic>``.

    :raises GraphFormatError: If the line is malformed.
    """
    tokens = line.split(" ")
    try:
        return parse_state(tokens[0]), float(tokens[1])
    except (IndexError, ValueError, StateFormatError) as e:
        raise GraphFormatError(f"Could not parse heuristic: {line}") from e


def add_edges(
    graph: Graph,
    lines: Iterable[str],
    parse_state: Callable[[str], State] = parse_letter_state,
) -> Graph:
    """
    Add one edge per line to the graph.
    """
    for line in lines:
        graph = graph.add_edge(*parse_edge(line, parse_state))
    return graph


def add_heuristics(
    graph: Graph,
    lines: Iterable[str],
    parse_state: Callable[[str], State] = parse_letter_state,
) -> Graph:
    """
    Set one heuristic per line. Every state must already be in the graph.

    :raises GraphFormatError: If a line is malformed or names an unknown state.
    """
    for line in lines:
        state, heuristic = parse_heuristic(line, parse_state)
        try:
            graph = graph.update_heuristic(state, heuristic)
        except NodeNotFoundError as e:
            raise GraphFormatError(f"Could not parse heuristic: {line}") from e
    return graph


def load_graph(
    lines: Iterable[str],
    parse_state: Callable[[str], State] = parse_letter_state,
    graph: Optional[Graph] = None,
) -> Graph:
    """
    Build a graph from the lines of a graph file.

    :param lines: The lines of the file, without line terminators.
    :param parse_state: Converts a token to a state.
    :param graph: Graph to add the edges and heuristics to. Defaults to the empty
        graph.

    :raises GraphFormatError: If any line is malformed.
    """
    if graph is None:
        graph = Graph()
    edges, heuristics = separate_lines(list(lines))
    graph = add_edges(graph, edges, parse_state)
    return add_heuristics(graph, heuristics, parse_state)


def load_graph_file(
    path: str, parse_state: Callable[[str], State] = parse_letter_state
) -> Graph:
    """
    Build a graph from a UTF-8 graph file. See ``load_graph``.

    :raises FileNotFoundError: If there is no file at ``path``.
    :raises OSError: If the file cannot be read, e.g. ``path`` is a directory.
    :raises GraphFormatError: If the file is not valid UTF-8, or any line is
        malformed.
    """
    with open(path, encoding="utf-8") as f:
        try:
            text = f.read()
        except UnicodeDecodeError as e:
            raise GraphFormatError(f"Could not decode file with path: {path}") from e
    return load_graph(text.splitlines(), parse_state)
