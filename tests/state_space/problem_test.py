import unittest

import graphsearch as gs


class TestProblem(unittest.TestCase):
    def test_create(self):
        graph = gs.Graph().add_edge("S", "G", 1.0)
        problem = gs.Problem.create(graph, "S", "G")
        self.assertEqual(problem.initial_node, graph.get_node("S"))
        self.assertEqual(problem.goal_state, "G")

    def test_initial_state_missing(self):
        with self.assertRaises(gs.NodeNotFoundError) as context:
            gs.Problem.create(gs.Graph(), "A", "A")
        self.assertEqual(str(context.exception), "Could not find node with state: A")

    def test_initial_node_missing(self):
        with self.assertRaises(gs.NodeNotFoundError):
            gs.Problem(gs.Graph().add_state("B"), gs.Node("A"), "B")

    def test_goal_state_not_checked(self):
        graph = gs.Graph().add_state("S")
        problem = gs.Problem.create(graph, "S", "Z")
        self.assertFalse(gs.breadth_first().search(problem))
