"""
This submodule contains the plan model: operators, the cluster they belong to and the plan root
"""

from .cluster import PlanCluster
from .explainable import NestedExplainable
from .operators import Aggregate, Filter, Join, JoinType, PlanNode, Project, Sort, TableScan, Union
from .query_plan import QueryPlan
from .sub_plan import SubPlan

__all__ = [
    "PlanCluster",
    "NestedExplainable",
    "PlanNode",
    "Aggregate",
    "Filter",
    "Join",
    "JoinType",
    "Project",
    "Sort",
    "TableScan",
    "Union",
    "QueryPlan",
    "SubPlan",
]
