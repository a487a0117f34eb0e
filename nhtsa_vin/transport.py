import logging
from typing import Any, Dict, Optional

import requests

from .constants import HTTP_PASSTHROUGH_OPTIONS
from .exceptions import UnsupportedRedirectError
from .models import ErrorKind, FetchResult

logger = logging.getLogger(__name__)


def _request_kwargs(options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    kwargs: Dict[str, Any] = {}
    for key, value in (options or {}).items():
        if key in HTTP_PASSTHROUGH_OPTIONS:
            kwargs[key] = value
        else:
            logger.warning(f"Ignoring unsupported HTTP option {key!r}")
    kwargs["allow_redirects"] = False
    return kwargs


def fetch(url: str, options: Optional[Dict[str, Any]] = None) -> FetchResult:
    """Issue one GET against ``url`` and classify the outcome.

    Network failures and non-2xx replies come back as a ``FetchResult``
    carrying the error; only a redirect raises, since the API never
    legitimately sends one.
    """
    kwargs = _request_kwargs(options)
    logger.info(f"GET {url}")
    try:
        response = requests.get(url, **kwargs)
    except requests.exceptions.RequestException as e:
        logger.warning(f"NHTSA request failed: {e}")
        return FetchResult(error=str(e), kind=ErrorKind.TRANSPORT)

    status = response.status_code
    if 200 <= status < 300:
        return FetchResult(body=response.text, status_code=status)
    if 300 <= status < 400:
        raise UnsupportedRedirectError(status, response.headers.get("Location"))

    reason = (response.reason or "").strip()
    if 400 <= status < 500:
        error = f"Client error: {status} {reason}".rstrip()
    else:
        error = reason or f"HTTP {status}"
    logger.warning(f"NHTSA request returned {status}: {error}")
    return FetchResult(error=error, kind=ErrorKind.TRANSPORT, status_code=status)
