"""Tests for the console sink."""

import io
import json

from bank_ops.models import CheckingAccount, SavingsAccount
from bank_ops.sinks import ConsoleSink


class TestConsoleSink:
    """Tests for ConsoleSink."""

    def test_write_batch_compact(self, checking: CheckingAccount, savings: SavingsAccount) -> None:
        out = io.StringIO()
        sink = ConsoleSink(pretty=False, stream=out)

        sink.write_batch("accounts", [checking, savings])

        lines = out.getvalue().splitlines()
        assert "Entity: accounts (2 records)" in lines
        payloads = [json.loads(line) for line in lines if line.startswith("{")]
        assert [p["number"] for p in payloads] == ["A", "B"]

    def test_write_batch_pretty(self, checking: CheckingAccount) -> None:
        out = io.StringIO()
        ConsoleSink(stream=out).write_batch("accounts", [checking])

        assert '  "number": "A"' in out.getvalue()

    def test_max_records(self, checking: CheckingAccount, savings: SavingsAccount) -> None:
        out = io.StringIO()
        ConsoleSink(pretty=False, max_records=1, stream=out).write_batch("accounts", [checking, savings])

        assert "... and 1 more records" in out.getvalue()
        assert '"number": "B"' not in out.getvalue()

    def test_close_summary(self, checking: CheckingAccount) -> None:
        out = io.StringIO()
        sink = ConsoleSink(pretty=False, stream=out)
        sink.write_batch("accounts", [checking])
        sink.write_batch("accounts", [checking])
        sink.write_batch("transactions", [])

        sink.close()

        text = out.getvalue()
        assert "Console Sink Summary" in text
        assert "  accounts: 2 records" in text
        assert "  transactions: 0 records" in text

    def test_defaults_to_stdout(self, capsys, checking: CheckingAccount) -> None:
        ConsoleSink(pretty=False).write_batch("accounts", [checking])

        assert "Entity: accounts (1 records)" in capsys.readouterr().out
