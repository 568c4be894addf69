"""Top-level package for the flight cost graph project.

This package builds an in-memory edge-weighted digraph from a flight
costs CSV (or the legacy numeric stream format) and exposes its
adjacency for downstream algorithms such as shortest-path search.
"""
