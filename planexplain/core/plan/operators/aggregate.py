from typing import TYPE_CHECKING, Sequence

from ._base import PlanNode

if TYPE_CHECKING:
    from planexplain.core.explain import PlanWriter
    from planexplain.core.plan.cluster import PlanCluster


class Aggregate(PlanNode):
    """Groups the rows of its input by the `group` field indices and evaluates the aggregate `calls` per group."""

    def __init__(
        self, cluster: "PlanCluster", input_node: PlanNode, group: Sequence[int], calls: Sequence[str] = ()
    ) -> None:
        super().__init__(cluster, [input_node])
        self.group = sorted(group)
        self.calls = list(calls)

    def explain_terms(self, writer: "PlanWriter") -> "PlanWriter":
        group = "{" + ", ".join(str(field) for field in self.group) + "}"
        return super().explain_terms(writer).item("group", group).item_if("aggs", self.calls, bool(self.calls))
