from ._base import PlanNode
from .aggregate import Aggregate
from .filter import Filter
from .join import Join, JoinType
from .project import Project
from .sort import Sort
from .table_scan import TableScan
from .union import Union

__all__ = ["PlanNode", "Aggregate", "Filter", "Join", "JoinType", "Project", "Sort", "TableScan", "Union"]
