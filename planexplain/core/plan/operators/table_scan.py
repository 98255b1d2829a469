from typing import TYPE_CHECKING, Sequence

from ._base import PlanNode

if TYPE_CHECKING:
    from planexplain.core.explain import PlanWriter
    from planexplain.core.plan.cluster import PlanCluster


class TableScan(PlanNode):
    """Leaf operator that reads all rows of a table.

    Args:
        cluster (PlanCluster): The cluster the node belongs to.
        table (Sequence[str]): The qualified name of the table, e.g. ["sales", "orders"].
    """

    def __init__(self, cluster: "PlanCluster", table: Sequence[str]) -> None:
        super().__init__(cluster)
        self.table = list(table)

    def explain_terms(self, writer: "PlanWriter") -> "PlanWriter":
        return super().explain_terms(writer).item("table", self.table)
