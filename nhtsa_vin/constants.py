import re
from typing import Tuple

NHTSA_URL = "https://vpic.nhtsa.dot.gov/api/vehicles/decodevin/"
URL_FORMAT_SUFFIX = "?format=json"

# vPIC error codes 0-3 are clean decodes or cosmetic warnings.
ERROR_CODE_THRESHOLD = 4
ERROR_CODE_VARIABLE = "Error Code"
EXECUTION_ERROR_PATTERN = re.compile(r"execution error", re.IGNORECASE)

MALFORMED_JSON_MESSAGE = "Response is not valid JSON"
MISSING_ERROR_CODE_MESSAGE = "Error Code missing from response"

LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")

PASSENGER_CAR = "PASSENGER CAR"
TRUCK = "TRUCK"
MULTIPURPOSE_VEHICLE = "MULTIPURPOSE PASSENGER VEHICLE (MPV)"
VAN_PATTERN = re.compile(r"van", re.IGNORECASE)
SPORT_UTILITY_PATTERN = re.compile(r"Sport Utility", re.IGNORECASE)

# Transform names understood by parser.TRANSFORMS.
VERBATIM = "verbatim"
CAPITALIZE = "capitalize"
INTEGER = "integer"

AttributeSpec = Tuple[str, str, str]

VEHICLE_ATTRIBUTES: Tuple[AttributeSpec, ...] = (
    ("Make", "make", CAPITALIZE),
    ("Model", "model", VERBATIM),
    ("Trim", "trim", VERBATIM),
    ("Model Year", "year", VERBATIM),
    ("Body Class", "body_style", VERBATIM),
    ("Vehicle Type", "vehicle_class", VERBATIM),
    ("Doors", "doors", INTEGER),
    ("Manufacturer Name", "manufacturer_name", VERBATIM),
    ("Series", "series", VERBATIM),
    ("Trim2", "trim2", VERBATIM),
    ("Series2", "series2", VERBATIM),
    ("Note", "note", VERBATIM),
    ("Gross Vehicle Weight Rating From", "gvwr_from", VERBATIM),
    ("Bed Length (inches)", "bed_length", VERBATIM),
    ("Curb Weight (pounds)", "curb_weight", VERBATIM),
    ("Wheel Base (inches) From", "wheelbase_from", VERBATIM),
    ("Wheel Base (inches) To", "wheelbase_to", VERBATIM),
    ("Gross Combination Weight Rating From", "gcwr_from", VERBATIM),
    ("Gross Combination Weight Rating To", "gcwr_to", VERBATIM),
    ("Gross Vehicle Weight Rating To", "gvwr_to", VERBATIM),
    ("Bed Type", "bed_type", VERBATIM),
    ("Cab Type", "cab_type", VERBATIM),
    ("Wheel Size Front (inches)", "wheel_size_front", VERBATIM),
    ("Wheel Size Rear (inches)", "wheel_size_rear", VERBATIM),
    ("Drive Type", "drive_type", VERBATIM),
    ("Brake System Type", "brake_system_type", VERBATIM),
    ("Engine Number of Cylinders", "engine_cylinders", VERBATIM),
    ("Fuel Type - Primary", "fuel_type", VERBATIM),
    ("Engine Configuration", "engine_config", VERBATIM),
    ("Engine Brake (hp) From", "engine_hp_from", VERBATIM),
    ("Engine Manufacturer", "engine_manufacturer", VERBATIM),
    ("Front Air Bag Locations", "front_airbags", VERBATIM),
    ("Side Air Bag Locations", "side_airbags", VERBATIM),
    ("Anti-lock Braking System (ABS)", "abs", VERBATIM),
    ("Electronic Stability Control (ESC)", "esc", VERBATIM),
    ("Traction Control", "traction_control", VERBATIM),
    ("Tire Pressure Monitoring System (TPMS) Type", "tpms", VERBATIM),
    ("Auto-Reverse System for Windows and Sunroofs", "auto_reverse", VERBATIM),
    ("Keyless Ignition", "keyless_ignition", VERBATIM),
    ("Adaptive Cruise Control (ACC)", "adaptive_cruise", VERBATIM),
    ("Crash Imminent Braking (CIB)", "cib", VERBATIM),
    ("Forward Collision Warning (FCW)", "fcw", VERBATIM),
    ("Dynamic Brake Support (DBS)", "dbs", VERBATIM),
    ("Blind Spot Warning (BSW)", "bsw", VERBATIM),
    ("Backup Camera", "backup_camera", VERBATIM),
    ("Rear Cross Traffic Alert", "rear_cross_traffic", VERBATIM),
    ("Rear Automatic Emergency Braking", "rear_aeb", VERBATIM),
    ("Daytime Running Light (DRL)", "drl", VERBATIM),
    ("Headlamp Light Source", "headlamp_source", VERBATIM),
    ("Semiautomatic Headlamp Beam Switching", "semi_auto_headlamp", VERBATIM),
)

BODY_CLASS_VARIABLE = "Body Class"
VEHICLE_TYPE_VARIABLE = "Vehicle Type"

# requests.get keyword arguments forwarded from the caller's option bag.
HTTP_PASSTHROUGH_OPTIONS = frozenset(
    {"timeout", "verify", "cert", "proxies", "headers", "auth", "stream"}
)
