"""Turn raised exceptions into escalating errors according to a severity policy."""

from __future__ import annotations

import logging

from fatality.classify.http import classify_requests_exception
from fatality.common.config_loader import SeverityPolicy
from fatality.common.constants import SEVERITY_FATAL, SEVERITY_NON_FATAL
from fatality.common.errors import EscalatedError
from fatality.common.logging import log_event
from fatality.core.escalating import EscalatingError, Fatal, NonFatal


def exception_names(exc_type: type) -> list[str]:
    """Names a policy may use for ``exc_type``, most specific class first."""
    names = []
    for cls in exc_type.__mro__:
        names.append(f"{cls.__module__}.{cls.__qualname__}")
        names.append(cls.__qualname__)
    return names


def severity_for_type(exc_type: type, policy: SeverityPolicy) -> str:
    for name in exception_names(exc_type):
        severity = policy.severity_for_name(name)
        if severity is not None:
            return severity
    return policy.default


def severity_for_exception(exc: BaseException, policy: SeverityPolicy) -> str:
    verdict = classify_requests_exception(exc, policy)
    if verdict is not None:
        return verdict
    return severity_for_type(type(exc), policy)


def wrap(exc: BaseException, severity: str) -> EscalatingError[BaseException]:
    if severity == SEVERITY_FATAL:
        return Fatal(exc)
    return NonFatal(exc)


def classify_exception(
    exc: BaseException,
    policy: SeverityPolicy,
    logger: logging.Logger | None = None,
) -> EscalatingError[BaseException]:
    if isinstance(exc, EscalatedError):
        escalating = exc.escalating
    else:
        escalating = wrap(exc, severity_for_exception(exc, policy))

    if logger is not None:
        log_event(
            logger,
            f"classified {type(exc).__qualname__}",
            event="CLASSIFY",
            severity=SEVERITY_FATAL if escalating.is_fatal() else SEVERITY_NON_FATAL,
            error_type=f"{type(exc).__module__}.{type(exc).__qualname__}",
            error_code=getattr(exc, "error_code", None),
            policy=policy.source,
        )
    return escalating
