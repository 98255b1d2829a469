import unittest
from unittest.mock import MagicMock

from planexplain.core.explain import PlanWriter
from planexplain.core.plan import PlanCluster, PlanNode


class TestPlanNode(unittest.TestCase):
    def setUp(self):
        self.cluster = PlanCluster()
        self.node = PlanNode(self.cluster)

    def test_init(self):
        self.assertEqual(self.node.inputs, [])
        self.assertIs(self.node.cluster, self.cluster)
        self.assertIs(self.node.metadata_query, self.cluster.metadata_query)

    def test_ids_are_unique_and_increasing(self):
        other = PlanNode(self.cluster)
        self.assertGreater(other.id, self.node.id)

    def test_type_name_and_str(self):
        self.assertEqual(self.node.type_name, "PlanNode")
        self.assertEqual(str(self.node), f"PlanNode#{self.node.id}")

    def test_explain_terms_single_input(self):
        node = PlanNode(self.cluster, [self.node])
        writer = MagicMock(spec=PlanWriter)
        writer.input.return_value = writer
        self.assertIs(node.explain_terms(writer), writer)
        writer.input.assert_called_once_with("input", self.node)

    def test_explain_terms_two_inputs(self):
        right = PlanNode(self.cluster)
        node = PlanNode(self.cluster, [self.node, right])
        writer = MagicMock(spec=PlanWriter)
        writer.input.return_value = writer
        node.explain_terms(writer)
        self.assertEqual(
            [call.args for call in writer.input.call_args_list], [("left", self.node), ("right", right)]
        )

    def test_explain_terms_many_inputs(self):
        children = [PlanNode(self.cluster) for _ in range(3)]
        node = PlanNode(self.cluster, children)
        writer = MagicMock(spec=PlanWriter)
        node.explain_terms(writer)
        self.assertEqual(
            [call.args for call in writer.input.call_args_list],
            [("input#0", children[0]), ("input#1", children[1]), ("input#2", children[2])],
        )

    def test_explain_calls_done(self):
        writer = MagicMock(spec=PlanWriter)
        self.node.explain(writer)
        writer.done.assert_called_once_with(self.node)

    def test_inputs_are_copied(self):
        children = [self.node]
        node = PlanNode(self.cluster, children)
        children.append(PlanNode(self.cluster))
        self.assertEqual(len(node.inputs), 1)
