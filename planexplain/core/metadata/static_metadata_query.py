from typing import TYPE_CHECKING, Any

from loguru import logger
from planexplain.core.detail_level import DetailLevel

from .metadata_query import MetadataQuery

if TYPE_CHECKING:
    from planexplain.core.plan import PlanNode


class StaticMetadataQuery(MetadataQuery):
    """
    A MetadataQuery backed by tables of precomputed statistics, keyed by node id.
    All nodes are visible unless hidden explicitly. Asking for a statistic that was never
    registered raises a KeyError.
    """

    def __init__(self) -> None:
        self._row_counts: dict[int, float] = {}
        self._cumulative_costs: dict[int, Any] = {}
        self._hidden_up_to: dict[int, DetailLevel] = {}

    def set_row_count(self, node: "PlanNode", row_count: float) -> "StaticMetadataQuery":
        self._row_counts[node.id] = row_count
        return self

    def set_cumulative_cost(self, node: "PlanNode", cost: Any) -> "StaticMetadataQuery":
        self._cumulative_costs[node.id] = cost
        return self

    def hide(self, node: "PlanNode", up_to: DetailLevel = DetailLevel.ALL_ATTRIBUTES) -> "StaticMetadataQuery":
        """
        Hides a node from explanations at every detail level up to and including `up_to`.

        Args:
            node (PlanNode): The node to hide.
            up_to (DetailLevel): The most verbose level at which the node is still hidden.
                Defaults to ALL_ATTRIBUTES, i.e. the node is never shown.

        Returns:
            StaticMetadataQuery: self, to allow chaining.
        """
        logger.debug(f"Hiding {node} in explanations up to {up_to.name}")
        self._hidden_up_to[node.id] = up_to
        return self

    def is_visible_in_explain(self, node: "PlanNode", detail_level: DetailLevel) -> bool:
        hidden_up_to = self._hidden_up_to.get(node.id)
        return hidden_up_to is None or detail_level > hidden_up_to

    def get_row_count(self, node: "PlanNode") -> float:
        try:
            return self._row_counts[node.id]
        except KeyError as err:
            raise KeyError(f"No row count registered for {node}") from err

    def get_cumulative_cost(self, node: "PlanNode") -> Any:
        try:
            return self._cumulative_costs[node.id]
        except KeyError as err:
            raise KeyError(f"No cumulative cost registered for {node}") from err
