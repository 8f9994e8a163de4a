"""Run observability helpers.

This package emits deterministic phase events for cleaning runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
