"""
Graph-to-annotation reducer.

Turns a JSON array of graph nodes back into flat-file entries. Only nodes
whose properties carry ``locus_tag``, ``protein_id``, ``product`` and
``translation`` produce an entry; everything else is skipped. No sequence
data is available in the graph, so the ORIGIN section is left empty.
"""
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Union

from emblgraph.core.io import load_json_array, write_text
from emblgraph.core.models import EmblEntry

logger = logging.getLogger(__name__)


def reduce_entries(values: Iterable[Any]) -> Iterator[EmblEntry]:
    """Yield an EmblEntry for every element carrying all annotation properties."""
    for index, value in enumerate(values):
        properties = value.get('properties') if isinstance(value, dict) else None
        entry = EmblEntry.from_properties(properties)
        if entry is None:
            logger.debug(f"Skipping element {index}: missing annotation properties")
            continue
        yield entry


def format_entry(entry: EmblEntry) -> str:
    """Render one entry as a flat-file block ending with ``//``."""
    # The LOCUS line is followed by an empty line.
    return (
        f"LOCUS       {entry.locus_tag}\tDNA\tlinear\n\n"
        f"DEFINITION  {entry.product}\n"
        f"ACCESSION   {entry.protein_id}\n"
        f"VERSION     {entry.protein_id}\n"
        "KEYWORDS    \n"
        "SOURCE      \n"
        "  ORGANISM  \n"
        "FEATURES             Location/Qualifiers\n"
        "     CDS             join(..)\n"
        f"                     /product=\"{entry.product}\"\n"
        f"                     /protein_id=\"{entry.protein_id}\"\n"
        f"                     /translation=\"{entry.translation}\"\n"
        "ORIGIN\n"
        "//\n"
    )


def format_entries(entries: Iterable[EmblEntry]) -> str:
    """Concatenate the blocks of several entries, in order."""
    return ''.join(format_entry(entry) for entry in entries)


def convert_graph_array(input_json: Union[str, Path], output_embl: Union[str, Path]) -> int:
    """
    Convert a JSON array graph file into a flat-file annotation file.

    Args:
        input_json: Path to a file holding a JSON array of nodes
        output_embl: Path of the annotation file to write

    Returns:
        Number of entries written

    Raises:
        GraphFormatError: If the input is not a JSON array
        OSError: If a file cannot be read or written
    """
    logger.info(f"Converting graph array {input_json}")
    data = load_json_array(input_json)
    entries = list(reduce_entries(data))
    write_text(output_embl, format_entries(entries))
    logger.info(f"Wrote {len(entries)} of {len(data)} elements as entries to {output_embl}")
    return len(entries)
