"""Performance benchmarks for adjgraph.

This package contains microbenchmarks comparing the dense, sparse and
tensor adjacency backings on traversal, all-pairs and closure workloads.
"""
