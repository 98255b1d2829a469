"""
This submodule contains general utility functions
"""

from .utils import get_env_variable, parse_bool  # noqa: F401

__all__ = ["get_env_variable", "parse_bool"]
