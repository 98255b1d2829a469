from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from planexplain.core.detail_level import DetailLevel
from planexplain.core.plan.explainable import NestedExplainable
from planexplain.core.plan.operators import PlanNode


class AttributeKind(Enum):
    SCALAR = auto()
    TEXT = auto()
    CHILD_REF = auto()
    NESTED_EXPLAINABLE = auto()

    @classmethod
    def of(cls, value: Any) -> "AttributeKind":
        if isinstance(value, PlanNode):
            return cls.CHILD_REF
        if isinstance(value, NestedExplainable):
            return cls.NESTED_EXPLAINABLE
        if isinstance(value, str):
            return cls.TEXT
        return cls.SCALAR


def format_value(
    value: Any, expand: bool = False, detail_level: DetailLevel = DetailLevel.EXPPLAN_ATTRIBUTES
) -> str:
    """
    Converts an attribute value to the text shown between its brackets.

    Args:
        value (Any): The value to format.
        expand (bool): Passed on to nested explainables.
        detail_level (DetailLevel): Passed on to nested explainables.

    Returns:
        str: The formatted value.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, NestedExplainable):
        return value.explain_inline(expand, detail_level)
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(item, expand, detail_level) for item in value) + "]"
    return str(value)


@dataclass(frozen=True)
class Attribute:
    name: str
    value: Any
    kind: AttributeKind

    @classmethod
    def of(cls, name: str, value: Any) -> "Attribute":
        return cls(name, value, AttributeKind.of(value))

    @property
    def is_child_ref(self) -> bool:
        return self.kind is AttributeKind.CHILD_REF

    def render(self, expand: bool = False, detail_level: DetailLevel = DetailLevel.EXPPLAN_ATTRIBUTES) -> str:
        return f"{self.name}=[{format_value(self.value, expand, detail_level)}]"
