"""Console sink for inspecting bank state during development."""

import json
import sys
from typing import Any, TextIO

from bank_ops.sinks.serialization import to_dict


class ConsoleSink:
    """Print records as JSON to a text stream (stdout by default)."""

    def __init__(
        self,
        pretty: bool = True,
        max_records: int | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize console sink.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        max_records : int | None
            Maximum records to print per batch (None for all).
        stream : TextIO | None
            Output stream; defaults to ``sys.stdout``.
        """
        self.pretty = pretty
        self.max_records = max_records
        self.stream = stream or sys.stdout
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> None:
        """Write a batch of records."""
        self._print(f"\n{'='*60}")
        self._print(f"Entity: {entity_type} ({len(records)} records)")
        self._print("=" * 60)

        display_records = records[: self.max_records] if self.max_records else records

        for record in display_records:
            data = to_dict(record)
            if self.pretty:
                self._print(json.dumps(data, indent=2, ensure_ascii=False, default=str))
            else:
                self._print(json.dumps(data, ensure_ascii=False, default=str))

        if self.max_records and len(records) > self.max_records:
            self._print(f"... and {len(records) - self.max_records} more records")

        self._counts[entity_type] = self._counts.get(entity_type, 0) + len(records)

    def close(self) -> None:
        """Print summary and close."""
        self._print(f"\n{'='*60}")
        self._print("Console Sink Summary")
        self._print("=" * 60)
        for entity_type, count in self._counts.items():
            self._print(f"  {entity_type}: {count} records")

    def _print(self, text: str) -> None:
        print(text, file=self.stream)
