from typing import Optional

from planexplain.core.metadata import MetadataQuery, StaticMetadataQuery


class PlanCluster:
    """
    A PlanCluster is the context shared by all nodes of one plan. The explain writer reaches the
    metadata service through the cluster of the node it is explaining.
    """

    def __init__(self, metadata_query: Optional[MetadataQuery] = None) -> None:
        self.metadata_query: MetadataQuery = metadata_query if metadata_query is not None else StaticMetadataQuery()
