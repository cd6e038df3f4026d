"""
Graphviz DOT projection of the JSON Lines graph.

Reads the builder's line-delimited output (not the JSON array consumed by
``convert``) and writes one vertex statement per node and one edge statement
per relationship, in input order.
"""
import logging
from pathlib import Path
from typing import Any, Iterable, Union

from emblgraph.core.io import iter_json_lines, write_text
from emblgraph.errors import GraphFormatError

logger = logging.getLogger(__name__)

DOT_HEADER = "digraph G {\n"
DOT_FOOTER = "}\n"


def _escape(text: str) -> str:
    return text.replace('"', '\\"')


def _label(value: Any) -> str:
    return _escape(value) if isinstance(value, str) else "unknown"


def _require_id(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise GraphFormatError(f"Missing string id for {where}")
    return value


def _get(value: Any, key: str) -> Any:
    return value.get(key) if isinstance(value, dict) else None


def project_dot(values: Iterable[Any]) -> str:
    """
    Render decoded graph elements as a DOT digraph.

    Args:
        values: Decoded JSON values, one per graph element

    Returns:
        The DOT document text

    Raises:
        GraphFormatError: If a node or relationship lacks its id fields
    """
    statements = [DOT_HEADER]
    for value in values:
        element_type = _get(value, 'type')
        if element_type == 'node':
            node_id = _require_id(value.get('id'), "node")
            name = _label(_get(value.get('properties'), 'name'))
            statements.append(f'    "{node_id}" [label="{name}"]\n')
        elif element_type == 'relationship':
            start_id = _require_id(_get(value.get('start'), 'id'), "relationship start")
            end_id = _require_id(_get(value.get('end'), 'id'), "relationship end")
            label = _label(value.get('label'))
            statements.append(f'    "{start_id}" -> "{end_id}" [label="{label}"]\n')
        else:
            logger.debug(f"Ignoring graph element of type {element_type!r}")
    statements.append(DOT_FOOTER)
    return ''.join(statements)


def render_dot_file(input_jsonl: Union[str, Path], output_dot: Union[str, Path]) -> str:
    """Project a JSON Lines graph file into a DOT file and return the text."""
    logger.info(f"Rendering DOT graph from {input_jsonl}")
    content = project_dot(iter_json_lines(input_jsonl))
    write_text(output_dot, content)
    logger.info(f"Wrote DOT graph to {output_dot}")
    return content
