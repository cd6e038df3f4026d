"""
Line classification for EMBL-style flat files.

Only a handful of line types matter for graph construction. Matching is done
on the raw line prefix, so any line starting with a known two-letter code is
classified as that section, whatever follows it.
"""
from enum import Enum
from typing import Optional


class LineTag(Enum):
    """Record section a line belongs to."""
    IDENTIFIER = "ID"
    ORGANISM_CLASS = "OC"
    FEATURE_TABLE = "FT"
    SECTION_BREAK = "XX"
    TERMINATOR = "//"
    OTHER = ""


_PREFIXES = (
    LineTag.IDENTIFIER,
    LineTag.ORGANISM_CLASS,
    LineTag.FEATURE_TABLE,
    LineTag.SECTION_BREAK,
    LineTag.TERMINATOR,
)


def classify_line(line: str) -> LineTag:
    """Return the section tag for a raw input line."""
    for tag in _PREFIXES:
        if line.startswith(tag.value):
            return tag
    return LineTag.OTHER


def parse_record_id(line: str) -> str:
    """
    Extract the record identifier from an ID line.

    The identifier is the second whitespace-delimited token with every ``;``
    removed, e.g. ``ID   AB123; SV 1; linear;`` gives ``AB123``.
    """
    tokens = line.split()
    if len(tokens) < 2:
        return ""
    return tokens[1].replace(";", "")


def parse_organism(line: str) -> str:
    """Return the trimmed text after the OC tag."""
    return line[len(LineTag.ORGANISM_CLASS.value):].strip()


def parse_feature_type(line: str) -> Optional[str]:
    """
    Extract the feature key from an FT line.

    Returns None when the line has no space at all, and an empty string when
    nothing but blanks follows the first space.
    """
    parts = line.split(' ', 1)
    if len(parts) < 2:
        return None
    tokens = parts[1].split()
    return tokens[0] if tokens else ""
