import json
from pathlib import Path

from fatality.cli import main
from fatality.common.constants import EXIT_FATAL, EXIT_HARD_FAIL, EXIT_SUCCESS


def test_cli_check_policy_with_repo_config(capsys):
    code = main(["check-policy", "--config", "config/severity_policy.yml"])
    out = json.loads(capsys.readouterr().out)

    assert code == EXIT_SUCCESS
    assert out["policy"] == "config/severity_policy.yml"
    assert "requests.exceptions.Timeout" in out["non_fatal"]
    assert out["retryable_status_codes"] == [408, 425, 429, 500, 502, 503, 504]


def test_cli_classify_fatal_and_non_fatal(capsys):
    assert main(["classify", "MemoryError"]) == EXIT_FATAL
    assert json.loads(capsys.readouterr().out)["severity"] == "fatal"

    assert main(["classify", "TimeoutError"]) == EXIT_SUCCESS
    assert json.loads(capsys.readouterr().out)["severity"] == "non_fatal"


def test_cli_classify_with_overlay(tmp_path: Path, capsys):
    overlay = tmp_path / "overlay.yml"
    overlay.write_text("fatal: [TimeoutError]\nnon_fatal: []\n", encoding="utf-8")

    code = main(["classify", "TimeoutError", "--config", "config/severity_policy.yml", "--overlay-config", str(overlay)])

    assert code == EXIT_FATAL
    assert json.loads(capsys.readouterr().out)["severity"] == "fatal"


def test_cli_hard_fails_on_bad_input(tmp_path: Path, capsys):
    assert main(["check-policy", "--config", str(tmp_path / "missing.yml")]) == EXIT_HARD_FAIL
    assert "CONFIG_ERROR" in capsys.readouterr().err

    assert main(["classify"]) == EXIT_HARD_FAIL
    assert main(["classify", "NoSuchError"]) == EXIT_HARD_FAIL
    assert main(["classify", "NoSuchError", "--status", "503"]) == EXIT_HARD_FAIL
