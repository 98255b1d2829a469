from enum import IntEnum, auto


class DetailLevel(IntEnum):
    """
    Controls how much annotation appears on each line of an explained plan.
    Members are ordered from the least to the most verbose.
    """

    NO_ATTRIBUTES = 0
    EXPPLAN_ATTRIBUTES = auto()
    NON_COST_ATTRIBUTES = auto()
    ALL_ATTRIBUTES = auto()

    @classmethod
    def parse(cls, name: str) -> "DetailLevel":
        """
        Looks up a detail level by its name, ignoring case and surrounding whitespace.

        Args:
            name (str): The name of the level, e.g. "all_attributes".

        Returns:
            DetailLevel: The matching level.
        """
        try:
            return cls[name.strip().upper()]
        except KeyError as err:
            valid = ", ".join(level.name for level in cls)
            raise ValueError(f"Unknown detail level {name!r}, expected one of: {valid}") from err
