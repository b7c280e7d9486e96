import unittest

from parameterized import parameterized

import graphsearch as gs


class TestGraph(unittest.TestCase):
    @parameterized.expand(
        [
            ("new_states", gs.Graph(), "A", "B", 1.0),
            ("existing_states", gs.Graph().add_state("A").add_state("B"), "A", "B", 2.5),
            ("overwrite", gs.Graph().add_edge("A", "B", 7.0), "B", "A", 3.0),
            ("zero_weight", gs.Graph(), "S", "G", 0.0),
        ]
    )
    def test_add_edge_symmetric(self, _, graph, source, destination, weight):
        graph = graph.add_edge(source, destination, weight)
        a, b = graph.get_node(source), graph.get_node(destination)
        self.assertEqual(graph.cost_between(a, b), weight)
        self.assertEqual(graph.cost_between(b, a), weight)

    def test_add_edge_creates_endpoints(self):
        graph = gs.Graph().add_edge("A", "B", 1.0)
        self.assertEqual(sorted(graph.states()), ["A", "B"])
        self.assertEqual(len(graph), 2)
        self.assertIn("A", graph)
        self.assertNotIn("C", graph)

    def test_add_edge_keeps_other_edges(self):
        graph = gs.Graph().add_edge("A", "B", 1.0).add_edge("A", "C", 2.0)
        self.assertEqual(dict(graph.get_node("A").edges), {"B": 1.0, "C": 2.0})
        self.assertEqual(dict(graph.get_node("B").edges), {"A": 1.0})
        self.assertEqual(dict(graph.get_node("C").edges), {"A": 2.0})

    def test_add_edge_does_not_modify(self):
        original = gs.Graph().add_edge("A", "B", 1.0)
        updated = original.add_edge("A", "B", 5.0).add_edge("B", "C", 1.0)
        self.assertEqual(dict(original.get_node("A").edges), {"B": 1.0})
        self.assertNotIn("C", original)
        self.assertEqual(dict(updated.get_node("A").edges), {"B": 5.0})

    def test_add_state_idempotent(self):
        graph = gs.Graph().add_edge("A", "B", 1.0)
        self.assertEqual(graph.add_state("A").add_state("A"), graph.add_state("A"))
        self.assertEqual(graph.add_state("A"), graph)
        self.assertEqual(
            gs.Graph().add_state("C").add_state("C"), gs.Graph().add_state("C")
        )

    def test_update_heuristic(self):
        original = gs.Graph().add_edge("A", "B", 1.0)
        updated = original.update_heuristic("A", 4.0)
        self.assertEqual(updated.get_node("A").heuristic, 4.0)
        self.assertEqual(updated.get_node("A").edges, original.get_node("A").edges)
        self.assertEqual(original.get_node("A").heuristic, 0.0)

    @parameterized.expand([("empty", gs.Graph()), ("other", gs.Graph().add_state("B"))])
    def test_update_heuristic_missing(self, _, graph):
        with self.assertRaises(gs.NodeNotFoundError) as context:
            graph.update_heuristic("A", 1.0)
        self.assertEqual(context.exception.state, "A")
        self.assertEqual(
            str(context.exception), "Could not find node with state: A"
        )

    def test_update_node_missing(self):
        with self.assertRaises(gs.NodeNotFoundError):
            gs.Graph().update_node("A", lambda node: node)

    def test_get_node_missing(self):
        with self.assertRaises(gs.NodeNotFoundError):
            gs.Graph().add_state("A").get_node("B")

    def test_cost_between_unconnected(self):
        graph = gs.Graph().add_state("A").add_state("B")
        self.assertIsNone(graph.cost_between(graph.get_node("A"), graph.get_node("B")))

    def test_expand_node(self):
        graph = gs.Graph().add_edge("A", "B", 1.0).add_edge("A", "C", 1.0)
        graph = graph.update_heuristic("C", 3.0)
        children = graph.expand_node(graph.get_node("A"))
        self.assertEqual(sorted(children), [graph.get_node("B"), graph.get_node("C")])
        self.assertEqual(graph.expand_node(graph.get_node("C")), [graph.get_node("A")])

    def test_expand_node_resolves_through_graph(self):
        # the heuristic was set after A's edge to B was recorded
        graph = gs.Graph().add_edge("A", "B", 1.0).update_heuristic("B", 2.0)
        [child] = graph.expand_node(graph.get_node("A"))
        self.assertEqual(child.heuristic, 2.0)
