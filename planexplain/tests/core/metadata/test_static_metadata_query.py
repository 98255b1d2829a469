import unittest

from planexplain.core.detail_level import DetailLevel
from planexplain.core.metadata import PlanCost, StaticMetadataQuery
from planexplain.core.plan import PlanCluster, TableScan


class TestStaticMetadataQuery(unittest.TestCase):
    def setUp(self):
        self.mq = StaticMetadataQuery()
        self.scan = TableScan(PlanCluster(self.mq), ["t"])

    def test_visible_by_default(self):
        for level in DetailLevel:
            self.assertTrue(self.mq.is_visible_in_explain(self.scan, level))

    def test_hide_at_all_levels(self):
        self.mq.hide(self.scan)
        for level in DetailLevel:
            self.assertFalse(self.mq.is_visible_in_explain(self.scan, level))

    def test_hide_up_to_level(self):
        self.mq.hide(self.scan, up_to=DetailLevel.EXPPLAN_ATTRIBUTES)
        self.assertFalse(self.mq.is_visible_in_explain(self.scan, DetailLevel.NO_ATTRIBUTES))
        self.assertFalse(self.mq.is_visible_in_explain(self.scan, DetailLevel.EXPPLAN_ATTRIBUTES))
        self.assertTrue(self.mq.is_visible_in_explain(self.scan, DetailLevel.NON_COST_ATTRIBUTES))
        self.assertTrue(self.mq.is_visible_in_explain(self.scan, DetailLevel.ALL_ATTRIBUTES))

    def test_statistics(self):
        cost = PlanCost(rows=5, cpu=2)
        self.mq.set_row_count(self.scan, 5).set_cumulative_cost(self.scan, cost)
        self.assertEqual(self.mq.get_row_count(self.scan), 5)
        self.assertIs(self.mq.get_cumulative_cost(self.scan), cost)

    def test_missing_statistics(self):
        with self.assertRaises(KeyError):
            self.mq.get_row_count(self.scan)
        with self.assertRaises(KeyError):
            self.mq.get_cumulative_cost(self.scan)
