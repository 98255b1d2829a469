from typing import TYPE_CHECKING, Optional, Sequence

from ._base import PlanNode

if TYPE_CHECKING:
    from planexplain.core.explain import PlanWriter
    from planexplain.core.plan.cluster import PlanCluster


class Sort(PlanNode):
    """Sorts its input by a collation and optionally keeps only the first `fetch` rows.

    Args:
        cluster (PlanCluster): The cluster the node belongs to.
        input_node (PlanNode): The input operator.
        collation (Sequence[tuple[int, bool]]): Pairs of (field index, descending).
        fetch (Optional[int]): Maximum number of rows to return. None means no limit.
    """

    def __init__(
        self,
        cluster: "PlanCluster",
        input_node: PlanNode,
        collation: Sequence[tuple[int, bool]],
        fetch: Optional[int] = None,
    ) -> None:
        super().__init__(cluster, [input_node])
        if fetch is not None and fetch < 0:
            raise ValueError(f"fetch must be non-negative, got {fetch}")
        self.collation = list(collation)
        self.fetch = fetch

    def explain_terms(self, writer: "PlanWriter") -> "PlanWriter":
        super().explain_terms(writer)
        for i, (field, descending) in enumerate(self.collation):
            writer.item(f"sort{i}", f"${field}").item(f"dir{i}", "DESC" if descending else "ASC")
        return writer.item_if("fetch", self.fetch, self.fetch is not None)
