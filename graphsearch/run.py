"""
Command line entry point: load a graph file and run every search strategy on it,
printing the fringe at each step.

Usage:
    python -m graphsearch.run GRAPH_FILE [--start S] [--goal G] [--depth-limit 2]
        [--beam-width 2] [--max-depth N]
"""

import argparse
import sys
from dataclasses import dataclass
from typing import List, Optional

from graphsearch.load import (
    GraphFormatError,
    StateFormatError,
    load_graph_file,
    parse_letter_state,
)
from graphsearch.render import render_expansion
from graphsearch.search.iterative_deepening import IterativeDeepening
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
from graphsearch.state_space.graph import NodeNotFoundError
from graphsearch.state_space.problem import Problem
from graphsearch.utils.logging import log


@dataclass
class SearchRunConfig:
    """
    Configuration for a run of every strategy over one graph.

    :param start: The state to search from (default: "S")
    :param goal: The state to search for (default: "G")
    :param depth_limit: Limit for depth-limited search (default: 2)
    :param beam_width: Width for beam search (default: 2)
    :param max_depth: Largest limit iterative deepening tries. If None, iterative
        deepening does not stop until it finds the goal (default: None)
    """

    start: str = "S"
    goal: str = "G"
    depth_limit: int = 2
    beam_width: int = 2
    max_depth: Optional[int] = None


def default_algorithms(config: SearchRunConfig) -> List[SearchStrategy]:
    """
    Every strategy, in the order they are run.
    """
    return [
        depth_first(),
        breadth_first(),
        depth_limited(config.depth_limit),
        IterativeDeepening(config.max_depth),
        uniform_cost(),
        greedy(),
        a_star(),
        hill_climbing(),
        beam(config.beam_width),
    ]


def run_search(algorithm: SearchStrategy, problem: Problem) -> bool:
    """
    Run a single strategy, logging each expansion step.
    """
    log(algorithm.name)
    log()
    log("   Expanded  Queue")

    def on_expand(fringe):
        log(render_expansion(fringe, algorithm.annotate))

    if isinstance(algorithm, IterativeDeepening):

        def on_deepen(limit):
            log(f"L={limit}")

        def after_round(limit):
            log()

        success = algorithm.search(
            problem, on_expand, on_deepen=on_deepen, after_round=after_round
        )
    else:
        success = algorithm.search(problem, on_expand)
    if success:
        log("      goal reached!")
    log()
    log()
    return success


def run_searches(problem: Problem, algorithms: List[SearchStrategy]) -> List[bool]:
    """
    Run each strategy in turn, returning whether each one reached the goal.
    """
    return [run_search(algorithm, problem) for algorithm in algorithms]


def non_negative_int(text: str) -> int:
    """
    Argument type for limits that may be zero.
    """
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(
            f"expected a non-negative integer, got {text}"
        )
    return value


def positive_int(text: str) -> int:
    """
    Argument type for widths, which must be at least one.
    """
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def parse_args(argv: Optional[List[str]] = None):
    """
    Parse command line arguments into the graph file path and a ``SearchRunConfig``.
    """
    parser = argparse.ArgumentParser(description=__doc__.strip().split("\n")[0])
    parser.add_argument("graph_file", help="path to the graph file")
    parser.add_argument("--start", default="S")
    parser.add_argument("--goal", default="G")
    parser.add_argument("--depth-limit", type=non_negative_int, default=2)
    parser.add_argument("--beam-width", type=positive_int, default=2)
    parser.add_argument(
        "--max-depth",
        type=non_negative_int,
        default=None,
        help="largest limit for iterative deepening; unbounded if omitted",
    )
    args = parser.parse_args(argv)
    config = SearchRunConfig(
        start=args.start,
        goal=args.goal,
        depth_limit=args.depth_limit,
        beam_width=args.beam_width,
        max_depth=args.max_depth,
    )
    return args.graph_file, config


def load_problem(path: str, config: SearchRunConfig) -> Problem:
    """
    Load the graph at ``path`` and pose the search from ``config.start`` to
    ``config.goal``.
    """
    try:
        graph = load_graph_file(path)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"Could not find file with path: {path}") from e
    except OSError as e:
        raise OSError(f"Could not read file with path: {path}") from e
    start = parse_letter_state(config.start)
    goal = parse_letter_state(config.goal)
    return Problem.create(graph, start, goal)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run every strategy on the graph file named on the command line.

    :return: The exit code: 0 on success, 1 if the problem could not be loaded.
        Invalid arguments exit through argparse with code 2.
    """
    path, config = parse_args(argv)
    try:
        problem = load_problem(path, config)
    except (
        OSError,
        GraphFormatError,
        NodeNotFoundError,
        StateFormatError,
    ) as e:
        log(e, file=sys.stderr)
        return 1
    run_searches(problem, default_algorithms(config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
