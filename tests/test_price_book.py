"""Tests for the batch pricing script."""

import csv
import importlib.util
import json
from pathlib import Path

import pytest

_SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "price_book.py"
_spec = importlib.util.spec_from_file_location("price_book", _SCRIPT)
price_book = importlib.util.module_from_spec(_spec)
_spec.loader.exec_module(price_book)

BOOK = [
    {"id": "1", "S": "100", "K": "100", "T": "1", "r": "0.05", "sigma": "0.2", "side": "call"},
    {"id": "2", "S": "100", "K": "100", "T": "1", "r": "0.05", "sigma": "0.2", "side": "p"},
    {"id": "3", "S": "100", "K": "100", "T": "0", "r": "0.05", "sigma": "0.2", "side": "call"},
    {"id": "4", "S": "100", "K": "100", "T": "1", "r": "0.05", "sigma": "0.2", "side": "x"},
]


def _write_book(path, rows):
    with open(path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0]))
        writer.writeheader()
        writer.writerows(rows)


class TestPriceRows:
    def test_valid_and_invalid_rows(self):
        results = price_book.price_rows(BOOK)
        assert [r["id"] for r in results] == ["1", "2", "3", "4"]
        assert results[0]["price"] == pytest.approx(10.4506, abs=1e-3)
        assert results[1]["price"] == pytest.approx(5.5735, abs=1e-3)
        assert results[2]["price"] is None
        assert "time_to_expiry" in results[2]["error"]
        assert results[3]["price"] is None

    def test_all_invalid(self):
        results = price_book.price_rows(BOOK[2:])
        assert all(r["price"] is None for r in results)


class TestMain:
    def test_json_output(self, tmp_path):
        src = tmp_path / "book.csv"
        dst = tmp_path / "out.json"
        _write_book(src, BOOK[:2])
        assert price_book.main(["--input", str(src), "--output", str(dst)]) == 0
        data = json.loads(dst.read_text())
        assert data[0]["delta"] == pytest.approx(0.6368, abs=1e-3)

    def test_short_row_recorded_not_fatal(self, tmp_path):
        src = tmp_path / "book.csv"
        dst = tmp_path / "out.json"
        src.write_text(
            "id,S,K,T,r,sigma,side\n"
            "1,100,100,1,0.05,0.2,call\n"
            "2,100,100\n"
        )
        assert price_book.main(["--input", str(src), "--output", str(dst)]) == 0
        data = json.loads(dst.read_text())
        assert data[0]["price"] == pytest.approx(10.4506, abs=1e-3)
        assert data[1]["price"] is None
        assert data[1]["error"]

    def test_csv_output(self, tmp_path):
        src = tmp_path / "book.csv"
        dst = tmp_path / "out.csv"
        _write_book(src, BOOK)
        price_book.main(["--input", str(src), "--output", str(dst)])
        with open(dst, newline="") as f:
            rows = list(csv.DictReader(f))
        assert len(rows) == 4
        assert rows[0]["error"] == ""
        assert rows[2]["price"] == ""
        assert rows[2]["error"]
