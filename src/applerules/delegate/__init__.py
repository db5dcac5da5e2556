"""Execution delegate interfaces and implementations."""

from .base import ExecutionDelegate
from .recording import RecordingDelegate

__all__ = [
    "ExecutionDelegate",
    "RecordingDelegate",
]
