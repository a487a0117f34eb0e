"""Live smoke check of VinQuery against NHTSA's vPIC API.

Usage:
    poetry run python scripts/decode_sample_vins.py [VIN ...]

The script does live HTTP calls to https://vpic.nhtsa.dot.gov, so it requires
an active internet connection.
"""
from __future__ import annotations

import dataclasses
import json
import logging
import pathlib
import sys
from typing import Dict, Iterable, Tuple

# Make sure `nhtsa_vin` is importable when executing the script from the repo root.
REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from nhtsa_vin.query import VinQuery

SAMPLE_VINS: Dict[str, str] = {
    "Passenger car": "1HGCM82633A004352",
    "Pickup": "1FTFW1E80PFA12345",
    "SUV": "5YJXCBE22HF068739",
    "Cargo van": "1FTYR2CM0KKA12345",
    "Bad check digit": "1HGCM82633A004353",
    "Too short": "1HGCM826",
}

SUMMARY_FIELDS: Tuple[str, ...] = ("make", "model", "year", "type", "body_style", "doors")


def describe(label: str, vin: str) -> Iterable[str]:
    query = VinQuery(vin)
    query.decode()
    yield "=" * 80
    yield f"{label}: {query.vin}"
    if not query.valid:
        kind = query.error_kind.value if query.error_kind else "unknown"
        yield f"INVALID ({kind}, code={query.error_code}): {query.error}"
        return
    record = query.response
    for field in SUMMARY_FIELDS:
        yield f"  {field}: {getattr(record, field)}"
    yield "\nFull record:"
    yield json.dumps(dataclasses.asdict(record), indent=2)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    targets = {vin: vin for vin in sys.argv[1:]} or SAMPLE_VINS
    for label, vin in targets.items():
        for line in describe(label, vin):
            print(line)


if __name__ == "__main__":
    main()
