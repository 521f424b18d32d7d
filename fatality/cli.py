"""CLI for checking severity policies and the verdicts they produce."""

from __future__ import annotations

import argparse
import builtins
import importlib
import json
import sys
from pathlib import Path

from fatality.classify.http import classify_status
from fatality.classify.policy import severity_for_type
from fatality.common.config_loader import SeverityPolicy, load_policy
from fatality.common.constants import EXIT_FATAL, EXIT_HARD_FAIL, EXIT_SUCCESS, SEVERITY_FATAL
from fatality.common.errors import FatalityError
from fatality.common.logging import build_logger, log_event


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("command", choices=["check-policy", "classify"])
    parser.add_argument("exception", nargs="?", default=None)
    parser.add_argument("--status", type=int, default=None)
    parser.add_argument("--config", default=None)
    parser.add_argument("--overlay-config", default=None)
    parser.add_argument("--allow-unknown", action="store_true")
    parser.add_argument("--log-level", default="WARN", choices=["DEBUG", "INFO", "WARN", "ERROR"])
    return parser.parse_args(argv)


def resolve_exception_type(name: str) -> type:
    module_name, _, attr = name.rpartition(".")
    try:
        target = getattr(importlib.import_module(module_name), attr) if module_name else getattr(builtins, attr)
    except (ImportError, AttributeError) as exc:
        raise FatalityError(f"Unknown exception type: {name}") from exc
    if not isinstance(target, type) or not issubclass(target, BaseException):
        raise FatalityError(f"Not an exception type: {name}")
    return target


def classify_name(name: str, policy: SeverityPolicy, status: int | None = None) -> str:
    exc_type = resolve_exception_type(name)
    if status is not None:
        verdict = classify_status(status, policy)
        if verdict is not None:
            return verdict
    return severity_for_type(exc_type, policy)


def run_command(args: argparse.Namespace) -> int:
    logger = build_logger("cli", level=args.log_level)
    config_path = Path(args.config) if args.config else None
    overlay_path = Path(args.overlay_config) if args.overlay_config else None
    policy = load_policy(config_path, overlay_path=overlay_path, allow_unknown=args.allow_unknown)
    log_event(logger, "policy loaded", event="POLICY_LOADED", policy=policy.source)

    if args.command == "check-policy":
        print(
            json.dumps(
                {
                    "policy": policy.source,
                    "default": policy.default,
                    "fatal": sorted(policy.fatal),
                    "non_fatal": sorted(policy.non_fatal),
                    "retryable_status_codes": sorted(policy.retryable_status_codes),
                },
                sort_keys=True,
            )
        )
        return EXIT_SUCCESS

    if not args.exception:
        raise FatalityError("classify requires an exception type name")
    severity = classify_name(args.exception, policy, status=args.status)
    log_event(
        logger,
        f"classified {args.exception}",
        event="CLASSIFY",
        severity=severity,
        error_type=args.exception,
        policy=policy.source,
    )
    print(json.dumps({"exception": args.exception, "status": args.status, "severity": severity}, sort_keys=True))
    if severity == SEVERITY_FATAL:
        return EXIT_FATAL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        return run_command(args)
    except FatalityError as exc:
        print(f"{exc.error_code}: {exc}", file=sys.stderr)
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
