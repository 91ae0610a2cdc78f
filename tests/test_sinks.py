"""Tests for serialization and export sinks."""

import json
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from unittest.mock import patch

import pytest

from bank_ledger.exceptions import SinkError
from bank_ledger.generators import load_sample_data
from bank_ledger.models import AccountType, BankStats
from bank_ledger.reports import build_report
from bank_ledger.sinks import ConsoleSink, JsonFileSink
from bank_ledger.sinks.serialization import serialize_value, to_dict
from bank_ledger.store import Ledger


class TestSerialization:
    """Tests for value and dataclass serialization."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("12.50"), "12.50"),
            (AccountType.BUSINESS, "Business"),
            (datetime(2024, 1, 2, 3, 4, 5), "2024-01-02T03:04:05"),
            (date(2024, 1, 2), "2024-01-02"),
            ((1, Decimal("2.00")), [1, "2.00"]),
            ({"a": [Decimal("1.00")]}, {"a": ["1.00"]}),
            ("plain", "plain"),
            (None, None),
        ],
    )
    def test_serialize_value(self, value: object, expected: object) -> None:
        assert serialize_value(value) == expected

    def test_account_to_dict(self, ledger: Ledger) -> None:
        ledger.open_account("ACC100", "Test User", "1000", "Checking")
        ledger.deposit("ACC100", "250")

        data = to_dict(ledger.require_account("ACC100"))

        assert data["account_number"] == "ACC100"
        assert data["account_type"] == "Checking"
        assert data["balance"] == "1250.00"
        assert [tx["transaction_type"] for tx in data["transaction_history"]] == ["created", "deposit"]
        assert data["transaction_history"][-1]["balance_after"] == "1250.00"
        json.dumps(data)

    def test_stats_enum_keys(self) -> None:
        stats = BankStats(total_accounts=0, total_balance=Decimal("0.00"))
        data = to_dict(stats)
        assert data["accounts_by_type"] == {"Savings": 0, "Checking": 0, "Business": 0}

    def test_to_dict_non_dataclass(self) -> None:
        assert to_dict({"k": Decimal("1.00")}) == {"k": "1.00"}
        assert to_dict(42) == {"value": "42"}


class TestJsonFileSink:
    """Tests for JSON file export."""

    def test_write_batch(self, ledger: Ledger, tmp_path: Path) -> None:
        load_sample_data(ledger)
        sink = JsonFileSink(tmp_path / "out", pretty=True)

        path = sink.write_batch("accounts", ledger.get_all_accounts())
        sink.close()

        assert path == tmp_path / "out" / "accounts.json"
        data = json.loads(path.read_text(encoding="utf-8"))
        assert [row["account_number"] for row in data] == ["ACC001", "ACC002", "ACC003", "ACC004"]

    def test_write_report(self, ledger: Ledger, tmp_path: Path) -> None:
        load_sample_data(ledger)
        sink = JsonFileSink(tmp_path)

        path = sink.write_batch("report", [build_report(ledger)])

        report = json.loads(path.read_text(encoding="utf-8"))[0]
        assert report["average_balance"] == "5450.00"
        assert report["account_type_breakdown"] == {"Savings": 2, "Checking": 1, "Business": 1}
        assert report["stats"]["total_balance"] == "21800.00"

    def test_write_failure_raises_sink_error(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path)
        with patch("builtins.open", side_effect=PermissionError("denied")):
            with pytest.raises(SinkError, match="Failed to write"):
                sink.write_batch("accounts", [])


class TestConsoleSink:
    """Tests for console output."""

    def test_write_batch(self, ledger: Ledger, capsys: pytest.CaptureFixture[str]) -> None:
        load_sample_data(ledger)
        sink = ConsoleSink(pretty=False, max_records=2)

        sink.write_batch("accounts", ledger.get_all_accounts())
        sink.close()

        out = capsys.readouterr().out
        assert "Entity: accounts (4 records)" in out
        assert '"account_number": "ACC001"' in out
        assert '"account_number": "ACC003"' not in out
        assert "... and 2 more records" in out
        assert "accounts: 4 records" in out
