"""
Benchmarks package.
Command line runner comparing searches on sample graphs.
"""
