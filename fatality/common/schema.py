"""Minimal strict schema for severity policy validation."""

from __future__ import annotations

from fatality.common.constants import SEVERITIES
from fatality.common.errors import ConfigError

POLICY_KNOWN_KEYS = {"default", "fatal", "non_fatal", "http"}
HTTP_KNOWN_KEYS = {"retryable_status_codes"}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_name_list(value, ctx: str) -> None:
    if not isinstance(value, list) or not all(isinstance(item, str) and item for item in value):
        raise ConfigError(f"{ctx} must be a list of exception names")


def validate_policy_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    if not isinstance(cfg, dict):
        raise ConfigError("severity policy must be a mapping")
    _assert_required_keys(cfg, {"default"}, "severity policy")
    _assert_no_unknown_keys(cfg, POLICY_KNOWN_KEYS, "severity policy", allow_unknown)

    if cfg["default"] not in SEVERITIES:
        raise ConfigError(f"severity policy.default must be one of: {', '.join(SEVERITIES)}")

    fatal = cfg.get("fatal", [])
    non_fatal = cfg.get("non_fatal", [])
    _assert_name_list(fatal, "severity policy.fatal")
    _assert_name_list(non_fatal, "severity policy.non_fatal")

    conflicts = set(fatal) & set(non_fatal)
    if conflicts:
        raise ConfigError(f"Exceptions listed as both fatal and non_fatal: {', '.join(sorted(conflicts))}")

    http = cfg.get("http", {})
    if not isinstance(http, dict):
        raise ConfigError("severity policy.http must be a mapping")
    _assert_no_unknown_keys(http, HTTP_KNOWN_KEYS, "http", allow_unknown)
    codes = http.get("retryable_status_codes", [])
    if not isinstance(codes, list):
        raise ConfigError("http.retryable_status_codes must be a list")
    for code in codes:
        if isinstance(code, bool) or not isinstance(code, int) or not 100 <= code <= 599:
            raise ConfigError(f"Invalid HTTP status code in http.retryable_status_codes: {code!r}")

    return cfg
