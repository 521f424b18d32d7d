import pytest
import requests

from fatality.cli import classify_name, parse_args, resolve_exception_type
from fatality.common.config_loader import SeverityPolicy
from fatality.common.errors import FatalityError


def test_parse_args_defaults():
    args = parse_args(["check-policy"])
    assert args.command == "check-policy"
    assert args.exception is None
    assert args.config is None
    assert args.overlay_config is None
    assert args.allow_unknown is False


def test_parse_args_classify_with_status():
    args = parse_args(["classify", "requests.exceptions.HTTPError", "--status", "503"])
    assert args.exception == "requests.exceptions.HTTPError"
    assert args.status == 503


def test_resolve_exception_type_builtin_and_dotted():
    assert resolve_exception_type("MemoryError") is MemoryError
    assert resolve_exception_type("requests.exceptions.Timeout") is requests.exceptions.Timeout


@pytest.mark.parametrize("name", ["NoSuchError", "nosuchmodule.Error", "len", "builtins.str"])
def test_resolve_exception_type_rejects_non_exceptions(name):
    with pytest.raises(FatalityError):
        resolve_exception_type(name)


def test_classify_name_prefers_http_status():
    policy = SeverityPolicy()
    assert classify_name("requests.exceptions.HTTPError", policy, status=503) == "non_fatal"
    assert classify_name("requests.exceptions.HTTPError", policy, status=401) == "fatal"
    assert classify_name("MemoryError", policy, status=200) == "fatal"


def test_classify_name_resolves_type_before_status():
    with pytest.raises(FatalityError):
        classify_name("NoSuchError", SeverityPolicy(), status=503)
