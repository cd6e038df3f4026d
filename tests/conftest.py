import json
import pytest
from pathlib import Path

SINGLE_CDS = """ID   AB123; SV 1; linear; genomic DNA; STD; PRO; 120 BP.
XX
OC   Bacteria.
XX
FH   Key             Location/Qualifiers
FT   CDS             1..120
FT                   /product="hypothetical protein"
XX
SQ   Sequence 120 BP;
//
"""


@pytest.fixture
def single_cds_lines():
    """The smallest record: one CDS feature."""
    return ["ID   AB123;", "OC   Bacteria.", "FT   CDS", "XX", "//"]


@pytest.fixture
def two_feature_lines():
    return ["ID   XY9;", "OC   Eukaryota; Fungi.", "FT   CDS", "FT   gene", "//"]


@pytest.fixture
def embl_file(tmp_path):
    """Creates a small EMBL-style file."""
    p = tmp_path / "record.embl"
    with open(p, "w") as f:
        f.write(SINGLE_CDS)
    return p


@pytest.fixture
def graph_array_file(tmp_path):
    """Creates a JSON array of nodes, two of which carry annotation properties."""
    p = tmp_path / "nodes.json"
    nodes = [
        {"type": "node", "id": "n0", "labels": ["Gene"],
         "properties": {"locus_tag": "b0001", "protein_id": "NP_414542.1",
                        "product": "thr operon leader peptide", "translation": "MKRISTTITTTITITTGNGAG"}},
        {"type": "node", "id": "n1", "labels": ["Gene"],
         "properties": {"locus_tag": "b0002", "product": "aspartokinase"}},
        {"type": "node", "id": "n2", "labels": ["Gene"],
         "properties": {"locus_tag": "b0003", "protein_id": "NP_414544.1", "product": "homoserine kinase",
                        "translation": "MVKVYAPASS", "organism": "Escherichia coli", "score": 3}},
    ]
    with open(p, "w") as f:
        json.dump(nodes, f)
    return p
