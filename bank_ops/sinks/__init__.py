"""Output sinks for exporting bank data."""

from bank_ops.sinks.console import ConsoleSink

__all__ = ["ConsoleSink"]
