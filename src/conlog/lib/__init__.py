"""Core conlog library exports."""

from conlog.lib.console import Console
from conlog.lib.ports import LineSink
from conlog.lib.sinks import CollectingSink, StructlogSink

__all__ = ["CollectingSink", "Console", "LineSink", "StructlogSink"]
