from .fringe import a_star_add, add_and_sort_by, add_to_back, add_to_front
from .general_search import MISSING_EDGE_COST, Algorithm
from .iterative_deepening import IterativeDeepening, iterative_deepening
from .search_strategy import SearchStrategy
from .strategies import (
    a_star,
    beam,
    breadth_first,
    depth_first,
    depth_limited,
    greedy,
    hill_climbing,
    uniform_cost,
)
