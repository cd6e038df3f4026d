"""
Graph construction and projection.

The builder writes JSON Lines; the DOT projector and the chain view read it
back. The JSON array consumed by ``emblgraph.reverse`` is a different shape.
"""

from .builder import GraphBuilder, build_graph_lines, dumps_element
from .chain import FeatureChain
from .dot import project_dot, render_dot_file

__all__ = ['GraphBuilder', 'build_graph_lines', 'dumps_element', 'FeatureChain', 'project_dot', 'render_dot_file']
