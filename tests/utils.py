import graphsearch as gs


def build_graph(edges, heuristics=()):
    graph = gs.Graph()
    for source, destination, weight in edges:
        graph = graph.add_edge(source, destination, weight)
    for state, heuristic in heuristics:
        graph = graph.update_heuristic(state, heuristic)
    return graph


def search_trace(algorithm, problem):
    """
    Run the search, returning its result along with the fringe at every step, each
    path rendered as a string.
    """
    fringes = []
    result = algorithm.search(problem, fringes.append)
    return result, [[str(path) for path in fringe] for fringe in fringes], fringes


# S-A-G costs 2 in total, the direct edge S-G costs 10
detour_graph = build_graph([("S", "A", 1), ("A", "G", 1), ("S", "G", 10)])

# true distances to G: S=3, A=2, B=1; the heuristics never overestimate them
informed_graph = build_graph(
    [("S", "A", 1), ("A", "B", 1), ("B", "G", 1), ("S", "G", 5), ("A", "G", 4)],
    [("S", 2), ("A", 2), ("B", 1)],
)

# G is three edges away from S
chain_graph = build_graph([("S", "A", 1), ("A", "B", 1), ("B", "G", 1)])

# G is only reachable through C
beam_graph = build_graph(
    [("S", "A", 1), ("S", "B", 1), ("S", "C", 1), ("S", "D", 1), ("C", "G", 1)],
    [("A", 1), ("B", 2), ("C", 2), ("D", 3)],
)

# a tree with no path from S to G
unreachable_graph = build_graph(
    [("S", "A", 1), ("S", "B", 1), ("A", "C", 1), ("E", "G", 1)]
)
