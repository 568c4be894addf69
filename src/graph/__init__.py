"""Graph-related code for representing the flight network.

This subpackage contains the edge-weighted digraph and the builder that
turns labelled CSV rows into one.
"""

from .digraph import EdgeView, EdgeWeightedDigraph
from .label_builder import LabelGraph, LabelGraphBuilder, VertexLabels, build_label_graph

__all__ = [
    "EdgeView",
    "EdgeWeightedDigraph",
    "LabelGraph",
    "LabelGraphBuilder",
    "VertexLabels",
    "build_label_graph",
]
