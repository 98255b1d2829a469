from typing import Any, Iterable, Optional, Sequence, Union

from loguru import logger
from planexplain.core.detail_level import DetailLevel
from planexplain.core.plan.operators import PlanNode

from .attribute import Attribute, format_value
from .attribute_buffer import AttributeBuffer
from .consistency import StructuralMismatchError, check_inputs_present
from .sinks import OutputSink
from .spacer import Spacer


class PlanWriter:
    """
    PlanWriter renders a plan as indented text, one line per visible node, e.g.

    .. code-block:: text

        3:Project(exprs=[[$0]]): rowcount = 100.0, cumulative cost = {100.0 rows, 10.0 cpu, 0.0 io}
          1:TableScan(table=[[sales, orders]]): rowcount = 100.0, cumulative cost = {100.0 rows, 0.0 cpu, 0.0 io}

    Nodes describe themselves in two phases: they first register their inputs and attributes with
    `item`/`input`, and then call `done`, which renders the line and recurses into the inputs. Each
    input in turn explains itself against the same writer.

    A writer holds mutable state (the pending attributes and the indentation) and must not be shared
    between concurrent explanations.

    Args:
        sink (OutputSink): Where the lines are written.
        detail_level (DetailLevel): How much annotation to show on each line.
        with_id_prefix (bool): If True, each line starts with "<id>:". Otherwise, for NON_COST_ATTRIBUTES
            and ALL_ATTRIBUTES, the id is appended at the end of the line instead.
        expand (bool): Whether nested plans used as attribute values are rendered in full.
        check_inputs (Optional[bool]): Whether `done` verifies that all inputs were registered.
            Defaults to on, unless Python runs with -O.
    """

    INDENT_STEP = 2

    def __init__(
        self,
        sink: OutputSink,
        detail_level: DetailLevel = DetailLevel.EXPPLAN_ATTRIBUTES,
        with_id_prefix: bool = True,
        expand: bool = False,
        check_inputs: Optional[bool] = None,
    ) -> None:
        self._sink = sink
        self._detail_level = detail_level
        self._with_id_prefix = with_id_prefix
        self._expand = expand
        self._check_inputs = __debug__ if check_inputs is None else check_inputs
        self._spacer = Spacer()
        self._values = AttributeBuffer()

    @property
    def detail_level(self) -> DetailLevel:
        return self._detail_level

    @property
    def with_id_prefix(self) -> bool:
        return self._with_id_prefix

    @property
    def expand(self) -> bool:
        return self._expand

    @property
    def check_inputs(self) -> bool:
        return self._check_inputs

    def nest(self) -> bool:
        return self._expand

    def item(self, term: str, value: Any) -> "PlanWriter":
        self._values.append(term, value)
        return self

    def item_if(self, term: str, value: Any, condition: bool) -> "PlanWriter":
        if condition:
            self.item(term, value)
        return self

    def input(self, term: str, node: PlanNode) -> "PlanWriter":
        return self.item(term, node)

    def done(self, node: PlanNode) -> "PlanWriter":
        """
        Finishes the registration of attributes for `node`, writes its line and explains its inputs.

        Args:
            node (PlanNode): The node the pending attributes belong to.

        Returns:
            PlanWriter: self, to allow chaining.

        Raises:
            StructuralMismatchError: If the registered inputs do not match the inputs of the node.
                The pending attributes are kept, and nothing is written.
        """
        if self._check_inputs:
            mismatch = check_inputs_present(node, self._values)
            if mismatch is not None:
                logger.error(f"Inconsistent explain terms: {mismatch.describe()}")
                raise StructuralMismatchError(mismatch)

        values = self._values.snapshot_and_clear()
        logger.debug(f"Explaining {node} with {len(values)} attributes at {self._detail_level.name}")
        self._explain(node, values)
        self._sink.flush()
        return self

    def explain(self, node: PlanNode, values: Iterable[Union[Attribute, tuple[str, Any]]]) -> None:
        """
        Explains `node` with an explicit list of attributes, bypassing the pending attributes and the
        input check. Attributes can be given as Attribute objects or as (name, value) pairs.
        """
        attributes = tuple(value if isinstance(value, Attribute) else Attribute.of(*value) for value in values)
        self._explain(node, attributes)
        self._sink.flush()

    def simple(self) -> str:
        """
        Converts the pending attributes to a string. Does not write to the sink.
        """
        return self._values.render_inline(self._expand, self._detail_level)

    render_inline = simple

    def _explain(self, node: PlanNode, values: Sequence[Attribute]) -> None:
        mq = node.metadata_query
        if not mq.is_visible_in_explain(node, self._detail_level):
            # render inputs in place of this node, at the same level
            logger.debug(f"{node} is not visible at {self._detail_level.name}")
            self._explain_inputs(node.inputs)
            return

        s: list[str] = []
        self._spacer.spaces(s)
        if self._with_id_prefix:
            s.append(f"{node.id}:")
        s.append(node.type_name)
        if self._detail_level != DetailLevel.NO_ATTRIBUTES:
            rendered = [
                value.render(self._expand, self._detail_level) for value in values if not value.is_child_ref
            ]
            if rendered:
                s.append("(" + ", ".join(rendered) + ")")
        if self._detail_level == DetailLevel.ALL_ATTRIBUTES:
            s.append(
                f": rowcount = {float(mq.get_row_count(node))}, "
                f"cumulative cost = {format_value(mq.get_cumulative_cost(node))}"
            )
        if self._detail_level in (DetailLevel.NON_COST_ATTRIBUTES, DetailLevel.ALL_ATTRIBUTES):
            if not self._with_id_prefix:
                # the id was not printed at the start of the line, so print it at the end
                s.append(f", id = {node.id}")
        self._sink.write_line("".join(s))

        self._spacer.add(self.INDENT_STEP)
        try:
            self._explain_inputs(node.inputs)
        finally:
            self._spacer.subtract(self.INDENT_STEP)

    def _explain_inputs(self, inputs: Sequence[PlanNode]) -> None:
        for child in inputs:
            child.explain(self)
