from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any, Tuple

CONTIG_LABEL = "Contig"
LEAD_LABEL = "Lead"
GENE_LABEL = "Gene"

OWNS = "OWNS"
NEXT = "NEXT"


@dataclass(frozen=True)
class Feature:
    """One entry of the feature table. Only the feature key is kept."""
    type: Optional[str] = None


@dataclass
class RecordSummary:
    """Everything the accumulator collected from one annotation input."""
    record_id: str = ""
    organism: str = ""
    annotations: Dict[str, str] = field(default_factory=dict)
    features: Tuple[Feature, ...] = ()


@dataclass
class GraphNode:
    """A typed node of the feature graph."""
    id: str
    labels: List[str]
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'type': 'node',
            'id': self.id,
            'labels': list(self.labels),
            'properties': dict(self.properties)
        }


@dataclass(frozen=True)
class NodeRef:
    """Endpoint of a relationship: node id plus a label hint."""
    id: str
    labels: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'labels': list(self.labels)}


@dataclass
class GraphRelationship:
    """A directed, labelled edge between two nodes."""
    id: str
    label: str
    start: NodeRef
    end: NodeRef

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'id': self.id,
            'type': 'relationship',
            'label': self.label,
            'start': self.start.to_dict(),
            'end': self.end.to_dict()
        }


@dataclass(frozen=True)
class EmblEntry:
    """Annotation fields recovered from a graph node for the reverse path."""
    locus_tag: str
    protein_id: str
    product: str
    translation: str

    # Checked in this order; the first missing one rejects the node.
    REQUIRED = ('locus_tag', 'protein_id', 'product', 'translation')

    @classmethod
    def from_properties(cls, properties: Any) -> Optional['EmblEntry']:
        """Build an entry if all four properties are present as strings."""
        if not isinstance(properties, dict):
            return None
        values = []
        for key in cls.REQUIRED:
            value = properties.get(key)
            if not isinstance(value, str):
                return None
            values.append(value)
        return cls(*values)
