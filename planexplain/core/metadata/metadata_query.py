from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from planexplain.core.detail_level import DetailLevel

if TYPE_CHECKING:
    from planexplain.core.plan import PlanNode


class MetadataQuery(ABC):
    """
    The metadata service answers statistical questions about plan nodes. The explain writer only
    reads from it; computing the statistics is the responsibility of the implementation.
    """

    @abstractmethod
    def is_visible_in_explain(self, node: "PlanNode", detail_level: DetailLevel) -> bool:
        """
        Decides whether a node gets its own line in an explanation at the given detail level.
        Invisible nodes are elided and their inputs take their place.

        Args:
            node (PlanNode): The node to decide on.
            detail_level (DetailLevel): The detail level of the explanation.

        Returns:
            bool: Whether the node is shown.
        """
        raise NotImplementedError()

    @abstractmethod
    def get_row_count(self, node: "PlanNode") -> float:
        """
        Estimates the number of rows the node produces.

        Args:
            node (PlanNode): The node to estimate.

        Returns:
            float: The estimated row count.
        """
        raise NotImplementedError()

    @abstractmethod
    def get_cumulative_cost(self, node: "PlanNode") -> Any:
        """
        Estimates the cost of the node together with all of its inputs.

        Args:
            node (PlanNode): The node to estimate.

        Returns:
            Any: The cost; only its text representation is used by the explain writer.
        """
        raise NotImplementedError()
