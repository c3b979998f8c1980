"""Output sinks for ems."""
from __future__ import annotations

from ems.output.sink import BufferSink, ConsoleSink, OutputSink, resolve_sink

__all__ = ["OutputSink", "ConsoleSink", "BufferSink", "resolve_sink"]
