from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from .constants import (
    BODY_CLASS_VARIABLE,
    CAPITALIZE,
    ERROR_CODE_THRESHOLD,
    ERROR_CODE_VARIABLE,
    EXECUTION_ERROR_PATTERN,
    INTEGER,
    LEADING_INT_PATTERN,
    MISSING_ERROR_CODE_MESSAGE,
    MULTIPURPOSE_VEHICLE,
    PASSENGER_CAR,
    SPORT_UTILITY_PATTERN,
    TRUCK,
    VAN_PATTERN,
    VEHICLE_ATTRIBUTES,
    VEHICLE_TYPE_VARIABLE,
    VERBATIM,
)
from .exceptions import UnexpectedResponseError
from .models import AttributeRow, DecodedVehicle, ErrorKind, ValidationOutcome

logger = logging.getLogger(__name__)


def coerce_int(value: Any) -> Optional[int]:
    """Leading integer of ``value`` (``"1,11"`` -> 1), or None when there is none."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = LEADING_INT_PATTERN.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def capitalize_first(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text[:1].upper() + text[1:]


TRANSFORMS: Dict[str, Callable[[Any], Any]] = {
    VERBATIM: lambda value: value,
    CAPITALIZE: capitalize_first,
    INTEGER: coerce_int,
}


def index_rows(rows: List[AttributeRow]) -> Dict[str, AttributeRow]:
    """Map each ``Variable`` name to its row; the first occurrence wins."""
    index: Dict[str, AttributeRow] = {}
    for row in rows:
        name = row.get("Variable")
        if name is not None and name not in index:
            index[name] = row
    return index


def _value(index: Dict[str, AttributeRow], name: str) -> Any:
    row = index.get(name)
    return row.get("Value") if row else None


def _rejection_message(payload: Dict[str, Any]) -> Optional[str]:
    results = payload.get("Results")
    if isinstance(results, list) and results and isinstance(results[0], dict):
        return results[0].get("Message")
    return None


def _result_rows(payload: Dict[str, Any]) -> List[AttributeRow]:
    results = payload.get("Results")
    if not isinstance(results, list):
        raise UnexpectedResponseError(
            f"Expected 'Results' to be a list, got {type(results).__name__}"
        )
    for position, row in enumerate(results):
        if not isinstance(row, dict):
            raise UnexpectedResponseError(
                f"Expected row {position} of 'Results' to be an object, got {type(row).__name__}"
            )
    return results


def validate(payload: Any) -> ValidationOutcome:
    """Classify a parsed ``decodevin`` payload.

    A top-level "execution error" message means the service refused the
    request outright. Otherwise the ``Error Code`` row decides: codes below
    4 are usable decodes, anything else (including a missing or
    non-numeric code) is a failed decode described by the row's ``Value``.

    Raises UnexpectedResponseError when the payload does not have the
    shape of a vPIC reply at all.
    """
    if not isinstance(payload, dict):
        raise UnexpectedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )

    message = payload.get("Message")
    if isinstance(message, str) and EXECUTION_ERROR_PATTERN.search(message):
        return ValidationOutcome(
            valid=False,
            error=_rejection_message(payload),
            kind=ErrorKind.REMOTE_REJECTION,
        )

    rows = _result_rows(payload)
    index = index_rows(rows)
    error_row = index.get(ERROR_CODE_VARIABLE)
    if error_row is None:
        return ValidationOutcome(
            valid=False,
            error=MISSING_ERROR_CODE_MESSAGE,
            kind=ErrorKind.DECODE_FAILURE,
            rows=rows,
        )

    error_code = coerce_int(error_row.get("ValueId"))
    if error_code is not None and error_code < ERROR_CODE_THRESHOLD:
        return ValidationOutcome(valid=True, error_code=error_code, rows=rows)

    error = error_row.get("Value")
    if error_code is None:
        error = error or MISSING_ERROR_CODE_MESSAGE
    return ValidationOutcome(
        valid=False,
        error=error,
        error_code=error_code,
        kind=ErrorKind.DECODE_FAILURE,
        rows=rows,
    )


def derive_vehicle_type(body_class: Optional[str], vehicle_type: Optional[str]) -> Optional[str]:
    if vehicle_type == PASSENGER_CAR:
        return "Car"
    if vehicle_type == TRUCK:
        return "Van" if body_class and VAN_PATTERN.search(str(body_class)) else "Truck"
    if vehicle_type == MULTIPURPOSE_VEHICLE:
        if body_class and SPORT_UTILITY_PATTERN.search(str(body_class)):
            return "SUV"
        return "Minivan"
    return vehicle_type


def build_record(
    vin: str, rows: List[AttributeRow], error_code: Optional[int] = None
) -> DecodedVehicle:
    """Project validated rows onto a DecodedVehicle; absent rows become None."""
    index = index_rows(rows)
    fields: Dict[str, Any] = {}
    for variable, field_name, transform in VEHICLE_ATTRIBUTES:
        fields[field_name] = TRANSFORMS[transform](_value(index, variable))

    fields["type"] = derive_vehicle_type(
        _value(index, BODY_CLASS_VARIABLE), _value(index, VEHICLE_TYPE_VARIABLE)
    )
    logger.debug(
        "Decoded %s: %s fields present", vin, sum(1 for v in fields.values() if v is not None)
    )
    return DecodedVehicle(vin=vin, error_code=error_code, **fields)
