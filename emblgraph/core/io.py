"""
File helpers for the two graph container shapes.

Graph output from ``process`` is JSON Lines: one compact JSON object per
line. Graph input to ``convert`` is a single JSON array. The two are not
interchangeable; each reader accepts only its own shape.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Union

from emblgraph.errors import GraphFormatError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def dumps_compact(value: Dict[str, Any]) -> str:
    """Serialize one graph element as a single JSON line (no newline)."""
    return json.dumps(value, separators=(',', ':'), sort_keys=True, ensure_ascii=False)


def write_json_lines(filepath: PathLike, lines: Iterable[str]) -> int:
    """Write pre-serialized JSON lines, each terminated by a newline."""
    content = ''.join(f"{line}\n" for line in lines)
    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(content)
    count = content.count('\n')
    logger.info(f"Wrote {count} graph lines to {filepath}")
    return count


def iter_json_lines(filepath: PathLike) -> Iterator[Any]:
    """
    Yield one decoded JSON value per line of a JSON Lines file.

    Raises:
        GraphFormatError: If a line is not valid JSON or the file is not UTF-8
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        try:
            for line_num, line in enumerate(f, 1):
                try:
                    yield json.loads(line.rstrip('\r\n'))
                except json.JSONDecodeError as e:
                    raise GraphFormatError(f"Invalid JSON on line {line_num} of {filepath}: {e}") from e
        except UnicodeDecodeError as e:
            raise GraphFormatError(f"{filepath} is not valid UTF-8: {e}") from e


def load_json_array(filepath: PathLike) -> List[Any]:
    """
    Load a file holding a single JSON array.

    Raises:
        GraphFormatError: If the content is not valid UTF-8 JSON or not an array
        OSError: If the file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise GraphFormatError(f"Invalid JSON in {filepath}: {e}") from e
        except UnicodeDecodeError as e:
            raise GraphFormatError(f"{filepath} is not valid UTF-8: {e}") from e
    if not isinstance(data, list):
        raise GraphFormatError(f"Expected a JSON array in {filepath}, got {type(data).__name__}")
    return data


def write_text(filepath: PathLike, content: str) -> None:
    with open(filepath, 'w', encoding='utf-8') as f:
        f.write(content)
