from typing import Optional

from planexplain.core.detail_level import DetailLevel
from planexplain.core.plan.operators import PlanNode

from .plan_writer import PlanWriter
from .sinks import OutputSink, StringSink


def explain_plan(
    node: PlanNode,
    detail_level: DetailLevel = DetailLevel.EXPPLAN_ATTRIBUTES,
    with_id_prefix: bool = True,
    expand: bool = False,
    sink: Optional[OutputSink] = None,
) -> str:
    """
    Explains the plan rooted at `node` with a fresh PlanWriter.

    Args:
        node (PlanNode): The root of the plan.
        detail_level (DetailLevel): How much annotation to show on each line.
        with_id_prefix (bool): Whether each line starts with the node id.
        expand (bool): Whether nested plans used as attribute values are rendered in full.
        sink (Optional[OutputSink]): Where to write the explanation. Defaults to a new StringSink.

    Returns:
        str: The explanation, one line per visible node, each terminated by a newline.
            If a sink other than a StringSink is passed, the text only goes to that sink and "" is returned.
    """
    if sink is None:
        sink = StringSink()
    writer = PlanWriter(sink, detail_level=detail_level, with_id_prefix=with_id_prefix, expand=expand)
    node.explain(writer)
    return sink.getvalue() if isinstance(sink, StringSink) else ""
