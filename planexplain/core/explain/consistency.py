from dataclasses import dataclass
from typing import Any, Optional, Sequence

from planexplain.core.plan.operators import PlanNode

from .attribute import Attribute

SUBSET_MARKER = "subset"


@dataclass(frozen=True)
class StructuralMismatch:
    """Describes the first input of a node that was not registered at the expected position."""

    node: PlanNode
    position: int
    expected: PlanNode
    found: Optional[Attribute]

    def describe(self) -> str:
        if self.found is None:
            return (
                f"{self.node}: input {self.expected} was not registered, "
                f"expected an attribute at position {self.position}"
            )
        found_value: Any = self.found.value
        return (
            f"{self.node}: attribute {self.found.name!r} at position {self.position} is {found_value!r}, "
            f"expected input {self.expected}"
        )


class StructuralMismatchError(AssertionError):
    def __init__(self, mismatch: StructuralMismatch) -> None:
        super().__init__(mismatch.describe())
        self.mismatch = mismatch


def check_inputs_present(node: PlanNode, attributes: Sequence[Attribute]) -> Optional[StructuralMismatch]:
    """
    Checks that every input of `node` was registered as an attribute, in order, before any other
    attribute. A single leading "subset" attribute is allowed in front of the inputs.

    Args:
        node (PlanNode): The node that is about to be explained.
        attributes (Sequence[Attribute]): The attributes registered for the node.

    Returns:
        Optional[StructuralMismatch]: The first mismatch, or None if the inputs line up.
    """
    i = 0
    if attributes and attributes[0].name == SUBSET_MARKER:
        i += 1
    for child in node.inputs:
        found = attributes[i] if i < len(attributes) else None
        if found is None or found.value is not child:
            return StructuralMismatch(node, i, child, found)
        i += 1
    return None
