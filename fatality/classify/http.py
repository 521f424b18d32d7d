"""Severity verdicts for HTTP failures raised through requests."""

from __future__ import annotations

import requests

from fatality.common.config_loader import SeverityPolicy
from fatality.common.constants import SEVERITY_FATAL, SEVERITY_NON_FATAL

MALFORMED_REQUEST_ERRORS = (
    requests.exceptions.URLRequired,
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
    requests.exceptions.InvalidHeader,
)


def classify_status(status_code: int, policy: SeverityPolicy) -> str | None:
    if status_code in policy.retryable_status_codes:
        return SEVERITY_NON_FATAL
    if status_code >= 400:
        return SEVERITY_FATAL
    return None


def response_status(exc: BaseException) -> int | None:
    response = getattr(exc, "response", None)
    status = getattr(response, "status_code", None)
    if isinstance(status, int):
        return status
    return None


def classify_requests_exception(exc: BaseException, policy: SeverityPolicy) -> str | None:
    """Return a severity for a requests failure, or None if it says nothing."""
    if not isinstance(exc, requests.exceptions.RequestException):
        return None
    status = response_status(exc)
    if status is not None:
        verdict = classify_status(status, policy)
        if verdict is not None:
            return verdict
    if isinstance(exc, requests.exceptions.SSLError):
        return SEVERITY_FATAL
    if isinstance(exc, MALFORMED_REQUEST_ERRORS):
        return SEVERITY_FATAL
    if isinstance(exc, (requests.exceptions.Timeout, requests.exceptions.ConnectionError)):
        return SEVERITY_NON_FATAL
    return None
