import json
from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

ACCORD_VIN = "1HGCM82633A123456"

ACCORD_VALUES: Dict[str, Optional[str]] = {
    "Make": "HONDA",
    "Model": "Accord",
    "Trim": "EX-V6",
    "Model Year": "2003",
    "Body Class": "Coupe",
    "Vehicle Type": "PASSENGER CAR",
    "Doors": "2",
    "Manufacturer Name": "AMERICAN HONDA MOTOR CO., INC.",
    "Series": None,
    "Drive Type": "FWD/Front-Wheel Drive",
    "Engine Number of Cylinders": "6",
    "Fuel Type - Primary": "Gasoline",
    "Engine Configuration": "V-Shaped",
    "Engine Brake (hp) From": "240",
    "Front Air Bag Locations": "1st Row (Driver and Passenger)",
    "Anti-lock Braking System (ABS)": "Standard",
    "Note": "",
}


def make_row(variable: str, value: Any, value_id: Any = None) -> Dict[str, Any]:
    return {
        "Value": value,
        "ValueId": value_id,
        "Variable": variable,
        "VariableId": sum(map(ord, variable)),
    }


def make_payload(
    values: Optional[Dict[str, Any]] = None,
    error_code: Optional[str] = "0",
    error_text: str = "0 - VIN decoded clean. Check Digit (9th position) is correct",
    message: str = "Results returned successfully. NOTE: Any missing decoded values should be interpreted as NHTSA does not have data on the specific variable.",
) -> Dict[str, Any]:
    rows: List[Dict[str, Any]] = []
    for variable, value in (ACCORD_VALUES if values is None else values).items():
        rows.append(make_row(variable, value, value_id="" if value is None else "1"))
    if error_code is not None:
        rows.append(make_row("Error Code", error_text, value_id=error_code))
    return {
        "Count": len(rows),
        "Message": message,
        "SearchCriteria": f"VIN:{ACCORD_VIN}",
        "Results": rows,
    }


def fake_response(status_code: int = 200, body: str = "", reason: str = "OK", headers=None):
    response = MagicMock()
    response.status_code = status_code
    response.text = body
    response.reason = reason
    response.headers = headers or {}
    return response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("NHTSA_VIN_TIMEOUT", "NHTSA_VIN_VERIFY_TLS"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def accord_body() -> str:
    return json.dumps(make_payload())
