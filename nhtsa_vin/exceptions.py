from typing import Optional


class NhtsaVinError(Exception):
    """Base class for faults the decoder refuses to absorb."""


class UnsupportedRedirectError(NhtsaVinError):
    def __init__(self, status_code: int, location: Optional[str] = None):
        self.status_code = status_code
        self.location = location
        super().__init__(
            f"No support for HTTP redirection from NHTSA API ({status_code} -> {location or '?'})"
        )


class UnexpectedResponseError(NhtsaVinError):
    """The reply broke the API contract; ``raw_body`` holds it for diagnostics."""

    def __init__(self, detail: str, raw_body: Optional[str] = None):
        self.detail = detail
        self.raw_body = raw_body
        message = detail if raw_body is None else f"{detail}: {raw_body!r}"
        super().__init__(message)
