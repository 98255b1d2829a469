"""
planexplain renders relational query plans as indented text, annotated with attributes, row counts and costs.
"""

from .core import DetailLevel  # noqa: F401
from .core.explain import (  # noqa: F401
    PlanWriter,
    StringSink,
    StructuralMismatchError,
    TextStreamSink,
    explain_plan,
)
from .core.metadata import MetadataQuery, PlanCost, StaticMetadataQuery  # noqa: F401
from .core.plan import PlanCluster, PlanNode, QueryPlan  # noqa: F401
from .config import ExplainConfig  # noqa: F401

__all__ = [
    "DetailLevel",
    "PlanWriter",
    "StringSink",
    "StructuralMismatchError",
    "TextStreamSink",
    "explain_plan",
    "MetadataQuery",
    "PlanCost",
    "StaticMetadataQuery",
    "PlanCluster",
    "PlanNode",
    "QueryPlan",
    "ExplainConfig",
]
