"""
Package marker for source code under `src`.
It groups the dashboard pipeline and shared helpers under a stable import path.
Most functionality lives in the sibling packages; this file intentionally stays lightweight.
"""
