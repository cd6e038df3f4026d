"""Line classification and the stateful feature parser."""

from .lines import LineTag, classify_line
from .accumulator import FeatureAccumulator, ParserState, parse_annotation_file

__all__ = ['LineTag', 'classify_line', 'FeatureAccumulator', 'ParserState', 'parse_annotation_file']
