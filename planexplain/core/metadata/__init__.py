"""
This submodule contains the metadata service consulted when explaining plans
"""

from .metadata_query import MetadataQuery
from .plan_cost import PlanCost
from .static_metadata_query import StaticMetadataQuery

__all__ = ["MetadataQuery", "PlanCost", "StaticMetadataQuery"]
