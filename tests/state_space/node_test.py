import unittest

import graphsearch as gs


class TestNode(unittest.TestCase):
    def test_defaults(self):
        node = gs.Node("A")
        self.assertEqual(dict(node.edges), {})
        self.assertEqual(node.heuristic, 0.0)
        self.assertEqual(str(node), "A")

    def test_order_by_state(self):
        self.assertLess(gs.Node("A", heuristic=5.0), gs.Node("B", heuristic=1.0))
        self.assertGreater(gs.Node("C"), gs.Node("B"))

    def test_order_by_heuristic_for_same_state(self):
        self.assertLess(gs.Node("A", heuristic=1.0), gs.Node("A", heuristic=2.0))
        self.assertEqual(
            sorted([gs.Node("B"), gs.Node("A", heuristic=2.0), gs.Node("A")]),
            [gs.Node("A"), gs.Node("A", heuristic=2.0), gs.Node("B")],
        )

    def test_with_edge(self):
        node = gs.Node("A").with_edge("B", 1.0)
        self.assertEqual(dict(node.with_edge("B", 2.0).edges), {"B": 2.0})
        self.assertEqual(dict(node.edges), {"B": 1.0})

    def test_hashable(self):
        node = gs.Node("A").with_edge("B", 1.0)
        self.assertEqual(len({node, gs.Node("A").with_edge("B", 1.0)}), 1)

    def test_state_mismatch(self):
        with self.assertRaises(gs.StateMismatchError):
            _ = gs.Node("A") < gs.Node(1)
