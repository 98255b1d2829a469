import itertools
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from planexplain.core.explain import PlanWriter
    from planexplain.core.metadata import MetadataQuery
    from planexplain.core.plan.cluster import PlanCluster

_NEXT_ID = itertools.count()


class PlanNode:
    """
    PlanNode is a single operator in the plan tree. It has three main attributes:

    * id: A process-wide unique integer, assigned at construction time.
    * cluster: The PlanCluster the node belongs to, which owns the metadata service.
    * inputs: List of child nodes (PlanNode), in the order the operator consumes them.

    The explain writer treats nodes as immutable.
    """

    def __init__(self, cluster: "PlanCluster", inputs: Sequence["PlanNode"] = ()) -> None:
        self.id = next(_NEXT_ID)
        self.cluster = cluster
        self.inputs: list[PlanNode] = list(inputs)

    @property
    def type_name(self) -> str:
        return self.__class__.__name__

    @property
    def metadata_query(self) -> "MetadataQuery":
        return self.cluster.metadata_query

    def explain_terms(self, writer: "PlanWriter") -> "PlanWriter":
        """
        Registers the attributes of this node with the writer. Inputs are registered first, in order.
        Subclasses call the base implementation and then add their own items.

        Args:
            writer (PlanWriter): The writer that collects the attributes.

        Returns:
            PlanWriter: The same writer, to allow chaining.
        """
        if len(self.inputs) == 1:
            writer.input("input", self.inputs[0])
        elif len(self.inputs) == 2:
            writer.input("left", self.inputs[0]).input("right", self.inputs[1])
        else:
            for i, child in enumerate(self.inputs):
                writer.input(f"input#{i}", child)
        return writer

    def explain(self, writer: "PlanWriter") -> None:
        """
        Writes this node and all of its descendants to the writer.

        Args:
            writer (PlanWriter): The writer to explain this node with.
        """
        self.explain_terms(writer).done(self)

    def __str__(self) -> str:
        return f"{self.type_name}#{self.id}"

    def __repr__(self) -> str:
        return str(self)
