import json
import pytest
from emblgraph.core.models import Feature, GraphNode, GraphRelationship, RecordSummary
from emblgraph.graph.builder import GraphBuilder, build_graph_lines, dumps_element
from emblgraph.parsing.accumulator import FeatureAccumulator


def _summary(*types, record_id="REC1", organism="Bacteria."):
    return RecordSummary(record_id=record_id, organism=organism,
                         features=tuple(Feature(type=t) for t in types))


def test_example_record_lines(single_cds_lines):
    summary = FeatureAccumulator().feed_lines(single_cds_lines).summary()
    lines = build_graph_lines(summary)
    assert lines == [
        '{"id":"AB123","labels":["Contig"],"properties":{"annotations":{"organism":"Bacteria."},'
        '"id":"AB123","name":"Bacteria.","organism":"Bacteria."},"type":"node"}',
        '{"id":"AB123_0","labels":["Lead"],"properties":{"name":"CDS","organism":"Bacteria.",'
        '"type":"CDS"},"type":"node"}',
        '{"end":{"id":"AB123_0","labels":["Lead"]},"id":"AB123_r_0","label":"OWNS",'
        '"start":{"id":"AB123","labels":["Contig"]},"type":"relationship"}',
    ]


def test_two_features(two_feature_lines):
    summary = FeatureAccumulator().feed_lines(two_feature_lines).summary()
    elements = [json.loads(line) for line in build_graph_lines(summary)]
    nodes = [e for e in elements if e["type"] == "node"]
    rels = [e for e in elements if e["type"] == "relationship"]

    assert [(n["id"], n["labels"], n["properties"].get("name")) for n in nodes[1:]] == [
        ("XY9_0", ["Lead"], "CDS"),
        ("XY9_1", ["Gene"], "gene"),
    ]
    assert [r["label"] for r in rels] == ["OWNS", "NEXT"]
    assert rels[1]["start"] == {"id": "XY9_0", "labels": ["Gene"]}
    assert rels[1]["end"] == {"id": "XY9_1", "labels": ["Gene"]}


@pytest.mark.parametrize("k", [0, 1, 2, 5])
def test_line_count_and_order(k):
    summary = _summary(*(f"f{i}" for i in range(k)))
    elements = list(GraphBuilder().build(summary))
    assert len(elements) == 1 + 2 * k
    assert isinstance(elements[0], GraphNode)
    assert elements[0].labels == ["Contig"]
    for i in range(k):
        assert isinstance(elements[1 + 2 * i], GraphNode)
        assert isinstance(elements[2 + 2 * i], GraphRelationship)


def test_relationship_identity_and_chain():
    summary = _summary("CDS", "gene", "tRNA", "CDS")
    rels = [e for e in GraphBuilder().build(summary) if isinstance(e, GraphRelationship)]

    assert [r.id for r in rels] == [f"REC1_r_{i}" for i in range(4)]
    assert rels[0].label == "OWNS"
    assert rels[0].start.id == "REC1"
    for i, rel in enumerate(rels[1:], 1):
        assert rel.label == "NEXT"
        assert rel.start.id == f"REC1_{i - 1}"
        assert rel.start.labels == ("Gene",)
        assert rel.end.id == f"REC1_{i}"


def test_start_label_hint_is_literal():
    # The second relationship starts at the Lead node but carries the Gene hint.
    rels = [e for e in GraphBuilder().build(_summary("CDS", "gene")) if isinstance(e, GraphRelationship)]
    assert rels[1].start.labels == ("Gene",)


def test_missing_type_fallbacks():
    node = list(GraphBuilder().build(_summary(None)))[1]
    assert node.properties["name"] == "Unnamed"
    assert node.properties["type"] == "Unknown"


def test_empty_type_is_kept():
    node = list(GraphBuilder().build(_summary("")))[1]
    assert node.properties["name"] == ""
    assert node.properties["type"] == ""


def test_empty_record_yields_contig_only():
    lines = build_graph_lines(RecordSummary())
    assert len(lines) == 1
    contig = json.loads(lines[0])
    assert contig == {"type": "node", "id": "", "labels": ["Contig"],
                      "properties": {"id": "", "name": "", "organism": "", "annotations": {}}}


def test_non_ascii_is_not_escaped():
    line = dumps_element(GraphNode(id="R", labels=["Contig"], properties={"name": "Émile"}))
    assert "Émile" in line
