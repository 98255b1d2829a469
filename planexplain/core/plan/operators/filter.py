from typing import TYPE_CHECKING

from ._base import PlanNode

if TYPE_CHECKING:
    from planexplain.core.explain import PlanWriter
    from planexplain.core.plan.cluster import PlanCluster


class Filter(PlanNode):
    """Filter keeps the rows of its input for which `condition` holds."""

    def __init__(self, cluster: "PlanCluster", input_node: PlanNode, condition: str) -> None:
        super().__init__(cluster, [input_node])
        self.condition = condition

    def explain_terms(self, writer: "PlanWriter") -> "PlanWriter":
        return super().explain_terms(writer).item("condition", self.condition)
