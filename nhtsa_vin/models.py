from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

AttributeRow = Dict[str, Any]


class ErrorKind(str, Enum):
    TRANSPORT = "transport"
    MALFORMED_RESPONSE = "malformed_response"
    REMOTE_REJECTION = "remote_rejection"
    DECODE_FAILURE = "decode_failure"


class QueryState(str, Enum):
    UNEXECUTED = "unexecuted"
    FETCHED = "fetched"
    PARSED = "parsed"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a single GET: a body on success, otherwise an error message."""

    body: Optional[str] = None
    error: Optional[str] = None
    kind: Optional[ErrorKind] = None
    status_code: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.body is not None


@dataclass(frozen=True)
class ValidationOutcome:
    valid: bool
    error: Optional[str] = None
    error_code: Optional[int] = None
    kind: Optional[ErrorKind] = None
    rows: Optional[List[AttributeRow]] = None


@dataclass(frozen=True)
class DecodedVehicle:
    """Fixed-shape projection of a vPIC ``decodevin`` reply."""

    vin: Optional[str] = None
    make: Optional[str] = None
    model: Optional[str] = None
    trim: Optional[str] = None
    type: Optional[str] = None
    year: Optional[str] = None
    body_style: Optional[str] = None
    vehicle_class: Optional[str] = None
    doors: Optional[int] = None
    manufacturer_name: Optional[str] = None
    series: Optional[str] = None
    trim2: Optional[str] = None
    series2: Optional[str] = None
    note: Optional[str] = None
    gvwr_from: Optional[str] = None
    bed_length: Optional[str] = None
    curb_weight: Optional[str] = None
    wheelbase_from: Optional[str] = None
    wheelbase_to: Optional[str] = None
    gcwr_from: Optional[str] = None
    gcwr_to: Optional[str] = None
    gvwr_to: Optional[str] = None
    bed_type: Optional[str] = None
    cab_type: Optional[str] = None
    wheel_size_front: Optional[str] = None
    wheel_size_rear: Optional[str] = None
    drive_type: Optional[str] = None
    brake_system_type: Optional[str] = None
    engine_cylinders: Optional[str] = None
    fuel_type: Optional[str] = None
    engine_config: Optional[str] = None
    engine_hp_from: Optional[str] = None
    engine_manufacturer: Optional[str] = None
    front_airbags: Optional[str] = None
    side_airbags: Optional[str] = None
    abs: Optional[str] = None
    esc: Optional[str] = None
    traction_control: Optional[str] = None
    tpms: Optional[str] = None
    auto_reverse: Optional[str] = None
    keyless_ignition: Optional[str] = None
    adaptive_cruise: Optional[str] = None
    cib: Optional[str] = None
    fcw: Optional[str] = None
    dbs: Optional[str] = None
    bsw: Optional[str] = None
    backup_camera: Optional[str] = None
    rear_cross_traffic: Optional[str] = None
    rear_aeb: Optional[str] = None
    drl: Optional[str] = None
    headlamp_source: Optional[str] = None
    semi_auto_headlamp: Optional[str] = None
    error_code: Optional[int] = None
