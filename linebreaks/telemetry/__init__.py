"""Telemetry and observability helpers.

This package emits deterministic pass-level events for transform runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
