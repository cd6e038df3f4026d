"""
Feature chain view over builder output.
Loads nodes and relationships into a NetworkX graph and walks the
OWNS/NEXT chain hanging off each contig.
"""
import logging
from typing import Any, Dict, Iterable, List, Optional
import networkx as nx

from emblgraph.core.models import CONTIG_LABEL, NEXT, OWNS
from emblgraph.errors import GraphFormatError


class FeatureChain:
    """
    Directed graph of contigs and their feature chains.
    Uses NetworkX for the graph structure.
    """

    def __init__(self):
        """Initialize an empty chain graph."""
        self.logger = logging.getLogger(__name__)
        self.graph = nx.DiGraph()

    def build_from_elements(self, values: Iterable[Dict[str, Any]]) -> nx.DiGraph:
        """
        Build the graph from decoded graph elements.

        Args:
            values: Decoded node and relationship objects

        Returns:
            NetworkX DiGraph with node attributes ``labels``/``properties``
            and edge attributes ``id``/``label``
        """
        self.graph.clear()
        for value in values:
            if not isinstance(value, dict):
                continue
            try:
                if value.get('type') == 'node':
                    self.graph.add_node(value['id'],
                                        labels=list(value.get('labels', [])),
                                        properties=dict(value.get('properties', {})))
                elif value.get('type') == 'relationship':
                    self.graph.add_edge(value['start']['id'], value['end']['id'],
                                        id=value.get('id'), label=value.get('label'))
            except (KeyError, TypeError) as e:
                raise GraphFormatError(f"Malformed graph element {value!r}: {e}") from e

        self.logger.info(f"Built feature chain graph with {self.graph.number_of_nodes()} nodes "
                         f"and {self.graph.number_of_edges()} edges")
        return self.graph

    def contigs(self) -> List[str]:
        """Return ids of all nodes labelled Contig, in insertion order."""
        return [node_id for node_id, data in self.graph.nodes(data=True)
                if CONTIG_LABEL in data.get('labels', [])]

    def _successor_by_label(self, node_id: str, label: str) -> Optional[str]:
        if node_id not in self.graph:
            return None
        for _, target, data in self.graph.out_edges(node_id, data=True):
            if data.get('label') == label:
                return target
        return None

    def successor(self, node_id: str) -> Optional[str]:
        """
        Get the feature following a node in its chain.

        Args:
            node_id: Contig or feature node id

        Returns:
            Id of the owned first feature (for a contig) or the NEXT feature,
            or None at the end of the chain
        """
        next_id = self._successor_by_label(node_id, NEXT)
        if next_id is None:
            next_id = self._successor_by_label(node_id, OWNS)
        return next_id

    def chain(self, contig_id: str) -> List[str]:
        """
        Get the ordered feature node ids owned by a contig.

        Args:
            contig_id: Id of the contig node

        Returns:
            Feature ids in chain order, empty if the contig owns nothing
        """
        ordered = []
        current = self._successor_by_label(contig_id, OWNS)
        while current is not None and current not in ordered:
            ordered.append(current)
            current = self._successor_by_label(current, NEXT)
        return ordered

    def summary(self) -> Dict[str, Any]:
        """Return node, edge and per-contig chain counts."""
        return {
            'nodes': self.graph.number_of_nodes(),
            'relationships': self.graph.number_of_edges(),
            'chains': {contig: len(self.chain(contig)) for contig in self.contigs()}
        }
