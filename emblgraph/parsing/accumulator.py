"""
Stateful feature parser for EMBL-style flat files.

The parser is a two-state machine driven by classified lines. It collects the
record identifier, the organism classification and an ordered list of
features, which the graph builder later turns into a chain of nodes.
"""
import logging
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from tqdm import tqdm

from emblgraph.core.models import Feature, RecordSummary
from emblgraph.errors import AnnotationFormatError
from emblgraph.parsing.lines import (
    LineTag,
    classify_line,
    parse_feature_type,
    parse_organism,
    parse_record_id,
)

logger = logging.getLogger(__name__)


class ParserState(Enum):
    IDLE = "idle"
    IN_FEATURE = "in_feature"


def transition(state: ParserState, tag: LineTag) -> ParserState:
    """Return the parser state after a line with the given tag."""
    if tag is LineTag.FEATURE_TABLE:
        return ParserState.IN_FEATURE
    if tag is LineTag.TERMINATOR:
        return ParserState.IDLE
    return state


class FeatureAccumulator:
    """
    Builds a RecordSummary from annotation lines.

    Features are immutable values; the open feature is appended to the list
    when the next FT line or a terminator arrives. A feature still open at the
    end of input is not part of the summary.
    """

    def __init__(self):
        self.state = ParserState.IDLE
        self.record_id = ""
        self.organism = ""
        self.annotations: Dict[str, str] = {}
        self.features: List[Feature] = []
        self._open: Optional[Feature] = None
        self.lines_seen = 0

    def feed(self, line: str) -> None:
        """Process one raw line (trailing newline allowed)."""
        line = line.rstrip('\r\n')
        self.lines_seen += 1
        tag = classify_line(line)

        if tag is LineTag.IDENTIFIER:
            self.record_id = parse_record_id(line)
        elif tag is LineTag.ORGANISM_CLASS:
            self.organism = parse_organism(line)
        elif tag is LineTag.FEATURE_TABLE:
            if self.state is ParserState.IN_FEATURE:
                self._flush()
            self._open = Feature(type=parse_feature_type(line))
        elif tag is LineTag.SECTION_BREAK:
            if self.state is ParserState.IN_FEATURE:
                self.annotations['organism'] = self.organism
        elif tag is LineTag.TERMINATOR:
            if self.state is ParserState.IN_FEATURE:
                self._flush()

        self.state = transition(self.state, tag)

    def feed_lines(self, lines: Iterable[str]) -> 'FeatureAccumulator':
        for line in lines:
            self.feed(line)
        return self

    def _flush(self) -> None:
        self.features.append(self._open if self._open is not None else Feature())
        self._open = None

    def summary(self) -> RecordSummary:
        """Return what has been collected so far."""
        if self.state is ParserState.IN_FEATURE:
            logger.warning(f"Input ended inside feature '{self._open.type if self._open else None}' "
                           f"without a '//' terminator; the feature is dropped")
        return RecordSummary(
            record_id=self.record_id,
            organism=self.organism,
            annotations=dict(self.annotations),
            features=tuple(self.features)
        )


def parse_annotation_file(filepath: Union[str, Path], progress: bool = False) -> RecordSummary:
    """
    Parse an EMBL-style file into a RecordSummary.

    Args:
        filepath: Path to the annotation file
        progress: Show a tqdm progress bar while reading

    Returns:
        The collected record summary

    Raises:
        AnnotationFormatError: If the file is not valid UTF-8
        OSError: If the file cannot be opened or read
    """
    logger.info(f"Parsing annotation file: {filepath}")
    accumulator = FeatureAccumulator()
    with open(filepath, 'r', encoding='utf-8') as handle:
        try:
            accumulator.feed_lines(tqdm(handle, desc="Parsing annotation", unit=" lines", disable=not progress))
        except UnicodeDecodeError as e:
            raise AnnotationFormatError(f"{filepath} is not valid UTF-8: {e}") from e

    summary = accumulator.summary()
    logger.info(f"Parsed record '{summary.record_id}' with {len(summary.features)} features "
                f"from {accumulator.lines_seen} lines")
    return summary
