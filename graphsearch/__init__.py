from graphsearch.load import (
    GraphFormatError,
    StateFormatError,
    load_graph,
    load_graph_file,
    parse_edge,
    parse_heuristic,
    parse_letter_state,
)
from graphsearch.render import render_expansion, render_fringe, render_path
from graphsearch.search.fringe import (
    a_star_add,
    add_and_sort_by,
    add_to_back,
    add_to_front,
    find_alternate_path,
)
from graphsearch.search.general_search import MISSING_EDGE_COST, Algorithm
from graphsearch.search.iterative_deepening import (
    IterativeDeepening,
    iterative_deepening,
)
from graphsearch.search.search_strategy import SearchStrategy
from graphsearch.search.strategies import (
    a_star,
    beam,
    breadth_first,
    depth_first,
    depth_limited,
    greedy,
    hill_climbing,
    uniform_cost,
)
from graphsearch.state_space.graph import Graph, NodeNotFoundError
from graphsearch.state_space.node import Node, StateMismatchError
from graphsearch.state_space.path import Path
from graphsearch.state_space.problem import Problem

from . import load, run, search, state_space
from .load import SEPARATOR
from .run import SearchRunConfig, default_algorithms
