from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from .config import merge_http_options
from .constants import MALFORMED_JSON_MESSAGE, NHTSA_URL, URL_FORMAT_SUFFIX
from .exceptions import UnexpectedResponseError
from .models import AttributeRow, DecodedVehicle, ErrorKind, QueryState
from .parser import build_record, validate
from .transport import fetch

logger = logging.getLogger(__name__)


class VinQuery:
    """One decode of one VIN against the vPIC ``decodevin`` endpoint.

    After ``decode()`` the outcome is read off the instance: ``valid``,
    ``error``, ``error_code`` and ``error_kind`` describe how it went,
    ``raw_response`` and ``data`` keep what the service sent, and
    ``response`` holds the DecodedVehicle when (and only when) the decode
    is valid. Build a new query for every VIN.
    """

    def __init__(self, vin: str, http_options: Optional[Dict[str, Any]] = None):
        self.vin = vin.strip().upper()
        self.http_options = merge_http_options(http_options)
        self.url = self._build_url()
        self.valid = False
        self.error: Optional[str] = None
        self.error_code: Optional[int] = None
        self.error_kind: Optional[ErrorKind] = None
        self.raw_response: Optional[str] = None
        self.data: Optional[List[AttributeRow]] = None
        self.response: Optional[DecodedVehicle] = None
        self.state = QueryState.UNEXECUTED

    def __repr__(self) -> str:
        return f"VinQuery(vin={self.vin!r}, state={self.state.value}, valid={self.valid})"

    def decode(self) -> Optional[DecodedVehicle]:
        self._reset()
        result = fetch(self.url, self.http_options)
        if not result.ok:
            self.error = result.error
            self.error_kind = result.kind
            self.state = QueryState.FAILED
            return None
        return self.load(result.body)

    def load(self, raw_body: str) -> Optional[DecodedVehicle]:
        """Parse a raw ``decodevin`` body, whether just fetched or captured earlier."""
        self._reset()
        self.raw_response = raw_body
        self.state = QueryState.FETCHED
        try:
            payload = json.loads(raw_body)
        except ValueError:
            self._fail(MALFORMED_JSON_MESSAGE, ErrorKind.MALFORMED_RESPONSE)
            return None
        except RecursionError as e:
            logger.error(f"NHTSA response for {self.vin} nests too deeply to parse")
            raise UnexpectedResponseError(str(e), raw_body) from e

        try:
            return self.parse(payload)
        except UnexpectedResponseError as e:
            logger.error(f"Unexpected NHTSA response for {self.vin}: {e.detail}")
            raise UnexpectedResponseError(e.detail, raw_body) from e
        except Exception as e:
            logger.error(f"Failed to parse NHTSA response for {self.vin}: {e}")
            raise UnexpectedResponseError(str(e), raw_body) from e

    def parse(self, payload: Any) -> Optional[DecodedVehicle]:
        outcome = validate(payload)
        self.data = outcome.rows
        self.error_code = outcome.error_code
        if not outcome.valid:
            self._fail(outcome.error, outcome.kind)
            return None

        self.response = build_record(self.vin, outcome.rows or [], outcome.error_code)
        self.valid = True
        self.state = QueryState.PARSED
        return self.response

    def _fail(self, error: Optional[str], kind: Optional[ErrorKind]) -> None:
        self.valid = False
        self.error = error
        self.error_kind = kind
        self.response = None
        self.state = QueryState.FAILED
        logger.warning(f"VIN {self.vin} not decoded ({kind.value if kind else 'unknown'}): {error}")

    def _reset(self) -> None:
        self.valid = False
        self.error = None
        self.error_code = None
        self.error_kind = None
        self.raw_response = None
        self.data = None
        self.response = None
        self.state = QueryState.UNEXECUTED

    def _build_url(self) -> str:
        return f"{NHTSA_URL}{self.vin}{URL_FORMAT_SUFFIX}"
