"""
Builds the node/relationship representation of a parsed record.

The record becomes one Contig node followed by a chain of feature nodes:
the contig OWNS the first feature and every feature points to the next one.
"""
import logging
from typing import Iterator, List, Union

from emblgraph.core.io import dumps_compact
from emblgraph.core.models import (
    CONTIG_LABEL,
    GENE_LABEL,
    LEAD_LABEL,
    NEXT,
    OWNS,
    GraphNode,
    GraphRelationship,
    NodeRef,
    RecordSummary,
)

logger = logging.getLogger(__name__)

GraphElement = Union[GraphNode, GraphRelationship]


def feature_node_id(record_id: str, index: int) -> str:
    return f"{record_id}_{index}"


def relationship_id(record_id: str, counter: int) -> str:
    return f"{record_id}_r_{counter}"


class GraphBuilder:
    """Converts a RecordSummary into an ordered stream of graph elements."""

    def build(self, summary: RecordSummary) -> Iterator[GraphElement]:
        """
        Yield the graph elements of a record.

        The contig node comes first; each feature then contributes its node
        followed by the relationship that reaches it.

        Args:
            summary: Parsed record

        Yields:
            GraphNode and GraphRelationship objects in output order
        """
        record_id = summary.record_id
        organism = summary.organism

        yield GraphNode(
            id=record_id,
            labels=[CONTIG_LABEL],
            properties={
                'id': record_id,
                'name': organism,
                'organism': organism,
                'annotations': dict(summary.annotations)
            }
        )

        rid = 0
        for index, feature in enumerate(summary.features):
            node_label = LEAD_LABEL if index == 0 else GENE_LABEL
            node_id = feature_node_id(record_id, index)

            yield GraphNode(
                id=node_id,
                labels=[node_label],
                properties={
                    'type': feature.type if feature.type is not None else "Unknown",
                    'organism': organism,
                    'name': feature.type if feature.type is not None else "Unnamed"
                }
            )

            # The start label is a fixed hint, not looked up from the start node.
            if index == 0:
                start = NodeRef(record_id, (CONTIG_LABEL,))
            else:
                start = NodeRef(feature_node_id(record_id, index - 1), (GENE_LABEL,))

            yield GraphRelationship(
                id=relationship_id(record_id, rid),
                label=OWNS if index == 0 else NEXT,
                start=start,
                end=NodeRef(node_id, (node_label,))
            )
            rid += 1

        logger.debug(f"Built {1 + len(summary.features)} nodes and {rid} relationships for '{record_id}'")


def dumps_element(element: GraphElement) -> str:
    """Serialize a node or relationship as one JSON line."""
    return dumps_compact(element.to_dict())


def build_graph_lines(summary: RecordSummary) -> List[str]:
    """Return the JSON Lines representation of a record, one string per element."""
    return [dumps_element(element) for element in GraphBuilder().build(summary)]
