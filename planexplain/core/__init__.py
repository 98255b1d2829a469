"""
This submodule contains the plan model, the metadata service and the explain writer
"""

from .detail_level import DetailLevel

__all__ = ["DetailLevel"]
