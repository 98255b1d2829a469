import unittest

from planexplain.core.explain import Attribute, AttributeBuffer
from planexplain.core.plan import PlanCluster, TableScan


class TestAttributeBuffer(unittest.TestCase):
    def setUp(self):
        self.buffer = AttributeBuffer()

    def test_empty(self):
        self.assertEqual(len(self.buffer), 0)
        self.assertEqual(self.buffer.render_inline(), "()")

    def test_append_chains_and_keeps_order(self):
        self.buffer.append("b", 2).append("a", 1)
        self.assertEqual([attribute.name for attribute in self.buffer], ["b", "a"])
        self.assertEqual(self.buffer[1], Attribute.of("a", 1))

    def test_snapshot_and_clear(self):
        self.buffer.append("a", 1)
        snapshot = self.buffer.snapshot_and_clear()
        self.assertEqual(snapshot, (Attribute.of("a", 1),))
        self.assertEqual(len(self.buffer), 0)
        self.buffer.append("b", 2)
        self.assertEqual(len(snapshot), 1)

    def test_render_inline_includes_inputs(self):
        scan = TableScan(PlanCluster(), ["t"])
        self.buffer.append("input", scan).append("exprs", "$0")
        self.assertEqual(self.buffer.render_inline(), f"(input=[TableScan#{scan.id}], exprs=[$0])")
