class Spacer:
    """Keeps track of the indentation, in columns, of the line being written."""

    def __init__(self, depth: int = 0) -> None:
        if depth < 0:
            raise ValueError(f"Indentation cannot be negative, got {depth}")
        self._depth = depth

    @property
    def depth(self) -> int:
        return self._depth

    def add(self, n: int) -> "Spacer":
        if n < 0:
            raise ValueError(f"Cannot add a negative number of columns ({n}), use subtract instead")
        self._depth += n
        return self

    def subtract(self, n: int) -> "Spacer":
        if n < 0:
            raise ValueError(f"Cannot subtract a negative number of columns ({n}), use add instead")
        if n > self._depth:
            raise ValueError(f"Cannot reduce indentation of {self._depth} by {n}")
        self._depth -= n
        return self

    def spaces(self, buf: list[str]) -> list[str]:
        buf.append(" " * self._depth)
        return buf

    def __str__(self) -> str:
        return " " * self._depth
