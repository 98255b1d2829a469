from typing import Optional

from planexplain.core.detail_level import DetailLevel
from planexplain.core.plan.operators import PlanNode


class QueryPlan:
    """
    QueryPlan is a tree structure that represents the execution plan of a query.
    """

    def __init__(self) -> None:
        # The root should be None only when the query plan is empty
        # (i.e., when initializing).
        self.root: Optional[PlanNode] = None

    def is_empty(self) -> bool:
        return self.root is None

    def add(self, node: PlanNode) -> None:
        """
        This method adds an operator to the QueryPlan.
        The new operator becomes the new root of the QueryPlan, so it has to consume the current root.
        Args:
            node (PlanNode): The operator to add.
        """
        if not self.is_empty() and not any(child is self.root for child in node.inputs):
            raise ValueError(f"{node} does not consume the current root {self.root}")
        self.root = node

    def explain(
        self, detail_level: DetailLevel = DetailLevel.EXPPLAN_ATTRIBUTES, with_id_prefix: bool = True
    ) -> str:
        """
        Returns the explanation of the query plan, one line per visible operator.

        Args:
            detail_level (DetailLevel): How much annotation to show on each line.
            with_id_prefix (bool): Whether each line starts with the operator id.

        Returns:
            str: The explanation, or "<empty>" if the plan has no operators.
        """
        if self.root is None:
            return "<empty>"

        from planexplain.core.explain import explain_plan  # pylint: disable=import-outside-toplevel

        # there is a trailing newline, so we strip it
        return explain_plan(self.root, detail_level=detail_level, with_id_prefix=with_id_prefix).rstrip("\n")

    def display(self) -> None:
        """
        This method prints the query plan in a tree format. For example:

        .. code-block:: text

            5:Union(all=[true])
              2:Filter(condition=[=($1, 'Go')])
                1:TableScan(table=[[code, files]])
              4:Filter(condition=[=($1, 'CSS')])
                3:TableScan(table=[[code, files]])
        """
        print(self.explain())

    def __str__(self) -> str:
        return self.explain()
