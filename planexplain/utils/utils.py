import os

_TRUE_VALUES = {"1", "true", "on", "yes"}
_FALSE_VALUES = {"0", "false", "off", "no"}


def get_env_variable(name: str, default: str) -> str:
    if name not in os.environ.keys():
        return default
    return os.environ[name]


def parse_bool(value: str) -> bool:
    """
    Parses a boolean flag as it is usually written in environment variables.

    Args:
        value (str): One of 1/0, true/false, on/off, yes/no (case-insensitive).

    Returns:
        bool: The parsed flag.
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")
