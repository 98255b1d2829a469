import io

from planexplain.core.detail_level import DetailLevel
from planexplain.core.explain import TextStreamSink, explain_plan
from planexplain.core.metadata import PlanCost, StaticMetadataQuery
from planexplain.core.plan import Filter, Join, PlanCluster, Project, TableScan


def test_explain_plan_returns_text():
    cluster = PlanCluster()
    scan = TableScan(cluster, ["sales", "orders"])
    filter_node = Filter(cluster, scan, ">($2, 10)")
    expected = f"{filter_node.id}:Filter(condition=[>($2, 10)])\n  {scan.id}:TableScan(table=[[sales, orders]])\n"
    assert explain_plan(filter_node) == expected


def test_explain_plan_with_costs():
    mq = StaticMetadataQuery()
    cluster = PlanCluster(mq)
    left = TableScan(cluster, ["a"])
    right = TableScan(cluster, ["b"])
    join = Join(cluster, left, right, "=($0, $2)")
    project = Project(cluster, join, ["$0", "$3"])
    for node, rows in ((left, 10), (right, 20), (join, 15), (project, 15)):
        mq.set_row_count(node, rows).set_cumulative_cost(node, PlanCost(rows, 1, 0))

    def suffix(rows, node):
        return f": rowcount = {rows}, cumulative cost = {{{rows} rows, 1.0 cpu, 0.0 io}}, id = {node.id}"

    lines = explain_plan(project, detail_level=DetailLevel.ALL_ATTRIBUTES, with_id_prefix=False).splitlines()
    assert lines == [
        "Project(exprs=[[$0, $3]])" + suffix(15.0, project),
        "  Join(condition=[=($0, $2)], joinType=[inner])" + suffix(15.0, join),
        "    TableScan(table=[[a]])" + suffix(10.0, left),
        "    TableScan(table=[[b]])" + suffix(20.0, right),
    ]


def test_explain_plan_to_stream():
    scan = TableScan(PlanCluster(), ["t"])
    stream = io.StringIO()
    assert explain_plan(scan, detail_level=DetailLevel.NO_ATTRIBUTES, sink=TextStreamSink(stream)) == ""
    assert stream.getvalue() == f"{scan.id}:TableScan\n"
