"""
Core number theory, report domain model, and report contracts.

This package has no dependency on the benchmark harness; the harness
composes it.
"""
