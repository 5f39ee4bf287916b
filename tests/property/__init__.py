# tests/property/__init__.py
"""Property-based tests for propkit.

Two kinds of properties live here:
- core/, generators/: Hypothesis checks of the engine itself (bounds,
  determinism, shrink order, termination)
- examples/: the demo properties, checked with propkit's own runner
"""
