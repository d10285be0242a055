"""Trace container returned by the max-flow engine."""

from flowtrace.results.trace import Trace

__all__ = ["Trace"]
