"""
emblgraph: EMBL-style annotation files as feature graphs.
"""

__version__ = "0.1.0"

from .parsing.accumulator import FeatureAccumulator, parse_annotation_file
from .graph.builder import GraphBuilder, build_graph_lines
from .graph.chain import FeatureChain
from .graph.dot import project_dot, render_dot_file
from .reverse.reducer import convert_graph_array, reduce_entries

__all__ = [
    "FeatureAccumulator",
    "parse_annotation_file",
    "GraphBuilder",
    "build_graph_lines",
    "FeatureChain",
    "project_dot",
    "render_dot_file",
    "convert_graph_array",
    "reduce_entries"
]
