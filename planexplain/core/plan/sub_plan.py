from planexplain.core.detail_level import DetailLevel
from planexplain.core.plan.explainable import NestedExplainable
from planexplain.core.plan.operators import PlanNode


class SubPlan(NestedExplainable):
    """Wraps the root of a nested plan so it can be passed as an attribute value, e.g. for `IN (SELECT ...)`."""

    def __init__(self, root: PlanNode) -> None:
        self.root = root

    def explain_inline(self, expand: bool, detail_level: DetailLevel) -> str:
        if not expand:
            return str(self.root)

        from planexplain.core.explain import explain_plan  # pylint: disable=import-outside-toplevel

        text = explain_plan(self.root, detail_level=detail_level, expand=expand)
        return ", ".join(line.strip() for line in text.splitlines())

    def __str__(self) -> str:
        return str(self.root)
