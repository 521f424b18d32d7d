"""Severity policy loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from fatality.common.constants import (
    DEFAULT_FATAL_EXCEPTIONS,
    DEFAULT_NON_FATAL_EXCEPTIONS,
    RETRYABLE_STATUS_CODES,
    SEVERITY_FATAL,
    SEVERITY_NON_FATAL,
)
from fatality.common.errors import ConfigError
from fatality.common.schema import validate_policy_config


@dataclass(frozen=True)
class SeverityPolicy:
    default: str = SEVERITY_NON_FATAL
    fatal: frozenset[str] = frozenset(DEFAULT_FATAL_EXCEPTIONS)
    non_fatal: frozenset[str] = frozenset(DEFAULT_NON_FATAL_EXCEPTIONS)
    retryable_status_codes: frozenset[int] = frozenset(RETRYABLE_STATUS_CODES)
    source: str = "builtin"

    def severity_for_name(self, name: str) -> str | None:
        if name in self.fatal:
            return SEVERITY_FATAL
        if name in self.non_fatal:
            return SEVERITY_NON_FATAL
        return None


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _read_policy_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}") from exc


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Severity policy not found: {path}")
    base = _read_policy_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = _read_policy_yaml(overlay_path)
    return _deep_merge(base, overlay)


def policy_from_config(cfg: dict, *, source: str = "inline", allow_unknown: bool = False) -> SeverityPolicy:
    validated = validate_policy_config(cfg, allow_unknown=allow_unknown)
    http = validated.get("http", {})
    return SeverityPolicy(
        default=validated["default"],
        fatal=frozenset(validated.get("fatal", [])),
        non_fatal=frozenset(validated.get("non_fatal", [])),
        retryable_status_codes=frozenset(http.get("retryable_status_codes", RETRYABLE_STATUS_CODES)),
        source=source,
    )


def load_policy(
    path: Path | None = None,
    *,
    overlay_path: Path | None = None,
    allow_unknown: bool = False,
) -> SeverityPolicy:
    if path is None:
        return SeverityPolicy()
    cfg = _load_yaml_with_overlay(path, overlay_path)
    return policy_from_config(cfg, source=str(path), allow_unknown=allow_unknown)
