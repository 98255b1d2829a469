from typing import TYPE_CHECKING, Optional, Sequence

from ._base import PlanNode

if TYPE_CHECKING:
    from planexplain.core.explain import PlanWriter
    from planexplain.core.plan.cluster import PlanCluster


class Project(PlanNode):
    """Computes a list of expressions over each row of its input.

    Args:
        cluster (PlanCluster): The cluster the node belongs to.
        input_node (PlanNode): The input operator.
        exprs (Sequence[str]): The projected expressions, e.g. ["$0", "+($1, 1)"].
        names (Optional[Sequence[str]]): Output field names. If given, each expression is
            registered as its own item under its field name instead of a single `exprs` item.
    """

    def __init__(
        self,
        cluster: "PlanCluster",
        input_node: PlanNode,
        exprs: Sequence[str],
        names: Optional[Sequence[str]] = None,
    ) -> None:
        super().__init__(cluster, [input_node])
        if names is not None and len(names) != len(exprs):
            raise ValueError(f"Got {len(names)} field names for {len(exprs)} expressions")
        self.exprs = list(exprs)
        self.names = list(names) if names is not None else None

    def explain_terms(self, writer: "PlanWriter") -> "PlanWriter":
        super().explain_terms(writer)
        if self.names is None:
            return writer.item("exprs", self.exprs)
        for name, expr in zip(self.names, self.exprs):
            writer.item(name, expr)
        return writer
