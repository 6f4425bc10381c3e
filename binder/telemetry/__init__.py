"""Telemetry scaffolds.

This package emits run events for assembly auditing.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
