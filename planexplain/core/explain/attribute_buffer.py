from typing import Any, Iterator

from planexplain.core.detail_level import DetailLevel

from .attribute import Attribute


class AttributeBuffer:
    """
    Ordered list of the attributes registered for the node that is about to be explained.
    Insertion order is the order in which the attributes are rendered.
    """

    def __init__(self) -> None:
        self._attributes: list[Attribute] = []

    def append(self, name: str, value: Any) -> "AttributeBuffer":
        self._attributes.append(Attribute.of(name, value))
        return self

    def snapshot_and_clear(self) -> tuple[Attribute, ...]:
        """
        Returns the buffered attributes and empties the buffer.

        Returns:
            tuple[Attribute, ...]: An immutable copy of the attributes, in insertion order.
        """
        snapshot = tuple(self._attributes)
        self._attributes.clear()
        return snapshot

    def render_inline(self, expand: bool = False, detail_level: DetailLevel = DetailLevel.EXPPLAN_ATTRIBUTES) -> str:
        """
        Converts all buffered attributes, including inputs, to "(name=[value], ...)".
        Does not modify the buffer.
        """
        return "(" + ", ".join(attribute.render(expand, detail_level) for attribute in self._attributes) + ")"

    def __len__(self) -> int:
        return len(self._attributes)

    def __iter__(self) -> Iterator[Attribute]:
        return iter(self._attributes)

    def __getitem__(self, index: int) -> Attribute:
        return self._attributes[index]
