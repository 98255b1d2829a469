import sys

from loguru import logger
from planexplain import (
    DetailLevel,
    ExplainConfig,
    PlanCluster,
    PlanCost,
    QueryPlan,
    StaticMetadataQuery,
    TextStreamSink,
)
from planexplain.core.plan import Aggregate, Filter, Join, Project, TableScan


def build_plan(mq: StaticMetadataQuery) -> QueryPlan:
    cluster = PlanCluster(mq)
    orders = TableScan(cluster, ["sales", "orders"])
    customers = TableScan(cluster, ["sales", "customers"])
    recent = Filter(cluster, orders, ">($3, 2024-01-01)")
    join = Join(cluster, recent, customers, "=($1, $5)")
    project = Project(cluster, join, ["$6", "$2"], names=["country", "amount"])
    aggregate = Aggregate(cluster, project, [0], ["SUM($1)"])

    cumulative: dict[int, PlanCost] = {}
    # inputs come before the operators that consume them
    for node, rows, own_cost in (
        (orders, 10000, PlanCost(10000, 10000, 10000)),
        (customers, 500, PlanCost(500, 500, 500)),
        (recent, 2500, PlanCost(2500, 2500)),
        (join, 2500, PlanCost(2500, 3000)),
        (project, 2500, PlanCost(2500, 2500)),
        (aggregate, 40, PlanCost(40, 2500)),
    ):
        cost = own_cost
        for child in node.inputs:
            cost = cost + cumulative[child.id]
        cumulative[node.id] = cost
        mq.set_row_count(node, rows).set_cumulative_cost(node, cost)
    # the projection only renames fields, so hide it unless all attributes are requested
    mq.hide(project, up_to=DetailLevel.NON_COST_ATTRIBUTES)

    query_plan = QueryPlan()
    for node in (orders, recent, join, project, aggregate):
        query_plan.add(node)
    return query_plan


def main() -> None:
    mq = StaticMetadataQuery()
    query_plan = build_plan(mq)
    logger.info("Default explanation:")
    query_plan.display()

    config = ExplainConfig.from_env()
    logger.info(f"Explanation at {config.detail_level.name}:")
    query_plan.root.explain(config.create_writer(TextStreamSink(sys.stdout)))


if __name__ == "__main__":
    main()
