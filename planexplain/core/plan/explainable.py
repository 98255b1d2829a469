from abc import ABC, abstractmethod

from planexplain.core.detail_level import DetailLevel


class NestedExplainable(ABC):
    """
    An attribute value that carries a plan of its own (e.g., a scalar subquery).
    The explain writer never descends into it; the value decides how it is shown on the parent's line.
    """

    @abstractmethod
    def explain_inline(self, expand: bool, detail_level: DetailLevel) -> str:
        """
        Returns the text shown inside the brackets of the attribute.

        Args:
            expand (bool): If True, the nested plan is rendered in full. Otherwise it is referenced opaquely.
            detail_level (DetailLevel): The detail level of the writer that renders the parent line.

        Returns:
            str: A single line of text.
        """
        raise NotImplementedError()
