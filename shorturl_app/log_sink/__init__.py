"""
Logging collaborator for URL shortener.
Implements Strategy Pattern for flexible log destinations.
"""

from .strategies import (
    LogSinkStrategy,
    ConsoleLogSink,
    RemoteLogSink,
    InMemoryLogSink,
    NullLogSink,
)
from .factory import LogSinkFactory, LogSinkBackend
from .models import LogEvent

__all__ = [
    "LogSinkStrategy",
    "ConsoleLogSink",
    "RemoteLogSink",
    "InMemoryLogSink",
    "NullLogSink",
    "LogSinkFactory",
    "LogSinkBackend",
    "LogEvent",
]
