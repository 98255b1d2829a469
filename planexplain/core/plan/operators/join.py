from enum import Enum
from typing import TYPE_CHECKING

from ._base import PlanNode

if TYPE_CHECKING:
    from planexplain.core.explain import PlanWriter
    from planexplain.core.plan.cluster import PlanCluster


class JoinType(Enum):
    INNER = "inner"
    LEFT = "left"
    RIGHT = "right"
    FULL = "full"
    SEMI = "semi"
    ANTI = "anti"


class Join(PlanNode):
    """Join combines the rows of two inputs that satisfy `condition`.

    Args:
        cluster (PlanCluster): The cluster the node belongs to.
        left (PlanNode): The left input.
        right (PlanNode): The right input.
        condition (str): The join condition, e.g. "=($0, $3)".
        join_type (JoinType): The kind of join. Defaults to an inner join.
    """

    def __init__(
        self,
        cluster: "PlanCluster",
        left: PlanNode,
        right: PlanNode,
        condition: str,
        join_type: JoinType = JoinType.INNER,
    ) -> None:
        super().__init__(cluster, [left, right])
        self.condition = condition
        self.join_type = join_type

    @property
    def left(self) -> PlanNode:
        return self.inputs[0]

    @property
    def right(self) -> PlanNode:
        return self.inputs[1]

    def explain_terms(self, writer: "PlanWriter") -> "PlanWriter":
        # The join type is shown in lower case, like in SQL
        return super().explain_terms(writer).item("condition", self.condition).item("joinType", self.join_type.value)
