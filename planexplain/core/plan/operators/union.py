from typing import TYPE_CHECKING, Sequence

from ._base import PlanNode

if TYPE_CHECKING:
    from planexplain.core.explain import PlanWriter
    from planexplain.core.plan.cluster import PlanCluster


class Union(PlanNode):
    """Union operator is used to combine the rows of several inputs.
    With `all_rows=True` it has bag semantics, meaning that it will not remove duplicates.

    Args:
        cluster (PlanCluster): The cluster the node belongs to.
        inputs (Sequence[PlanNode]): The inputs to combine. At least two are required.
        all_rows (bool): Whether duplicates are kept. Defaults to True.
    """

    def __init__(self, cluster: "PlanCluster", inputs: Sequence[PlanNode], all_rows: bool = True) -> None:
        if len(inputs) < 2:
            raise ValueError(f"Union operator must have at least 2 inputs, got {len(inputs)}")
        super().__init__(cluster, inputs)
        self.all_rows = all_rows

    def explain_terms(self, writer: "PlanWriter") -> "PlanWriter":
        # Unions always number their inputs, even when there are exactly two
        for i, child in enumerate(self.inputs):
            writer.input(f"input#{i}", child)
        return writer.item("all", self.all_rows)
