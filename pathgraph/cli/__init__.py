"""Command-line drivers for pathgraph."""
