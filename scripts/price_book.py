#!/usr/bin/env python3
"""Batch-price a book of European options.

Usage
-----
    python scripts/price_book.py --input book.csv --output prices.csv
    python scripts/price_book.py --input book.csv --output prices.json

Input CSV format
----------------
    id,S,K,T,r,sigma,side
    1,100,110,0.5,0.05,0.20,call
    2,100,95,1.0,0.05,0.25,p

Output
------
    CSV or JSON with columns: id, price, delta, gamma, vega, theta
    (plus ``error`` for rows that could not be priced).
"""

from __future__ import annotations
import argparse
import csv
import json
import logging
import sys
from pathlib import Path

import numpy as np

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from bsgreeks.core import OptionRequest
from bsgreeks.black_scholes_vec import price_and_greeks_vec

logger = logging.getLogger("price_book")

_FIELDS = ("price", "delta", "gamma", "vega", "theta")


def _parse_row(row: dict) -> OptionRequest:
    return OptionRequest(
        spot=float(row["S"]),
        strike=float(row["K"]),
        time_to_expiry=float(row["T"]),
        risk_free_rate=float(row["r"]),
        volatility=float(row["sigma"]),
        side=row["side"],
    )


def price_rows(rows: list[dict]) -> list[dict]:
    """Validate every row, then price the valid ones in one vectorised call."""
    results = []
    valid = []
    for i, row in enumerate(rows):
        rid = row.get("id", "")
        try:
            req = _parse_row(row)
        except (KeyError, TypeError, ValueError) as e:
            # InvalidParameter is a ValueError; short rows give None cells
            logger.warning("row %d (id=%s): %s", i, rid, e)
            results.append({"id": rid, "price": None, "error": str(e)})
            continue
        results.append({"id": rid})
        valid.append((len(results) - 1, req))

    if valid:
        reqs = [req for _, req in valid]
        out = price_and_greeks_vec(
            np.array([q.spot for q in reqs]),
            np.array([q.strike for q in reqs]),
            np.array([q.time_to_expiry for q in reqs]),
            np.array([q.risk_free_rate for q in reqs]),
            np.array([q.volatility for q in reqs]),
            [q.side for q in reqs],
        )
        for j, (pos, _) in enumerate(valid):
            for key in _FIELDS:
                results[pos][key] = float(out[key][j])
    return results


def write_results(results: list[dict], output_path: Path) -> None:
    if output_path.suffix == ".json":
        with open(output_path, "w") as f:
            json.dump(results, f, indent=2)
        return
    fieldnames = ["id", *_FIELDS]
    if any("error" in r for r in results):
        fieldnames.append("error")
    with open(output_path, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(results)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Batch-price a book of European options.")
    parser.add_argument("--input", required=True, help="Path to book CSV")
    parser.add_argument("--output", required=True, help="Output path (.csv or .json)")
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    with open(args.input, newline="") as f:
        rows = list(csv.DictReader(f))

    logger.info("pricing %d positions", len(rows))
    results = price_rows(rows)
    write_results(results, Path(args.output))

    failed = sum(1 for r in results if r.get("price") is None)
    logger.info("priced %d | failed %d -> %s", len(results) - failed, failed, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
