"""Tests for the stackreport CLI entry point."""

import io
from pathlib import Path
from unittest.mock import patch

import pytest

from stackreport.main import main, parse_args
from stackreport.models import Comment, ReconcileOutcome


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "GITHUB_EVENT_PATH",
        "GITHUB_REPOSITORY",
        "GITHUB_TOKEN",
        "GITHUB_TOKEN_FILE",
        "REPORT_COMMAND",
        "REPORT_STACK_NAME",
        "REPORT_EDIT_COMMENT_ON_PR",
    ):
        monkeypatch.delenv(key, raising=False)


def _outcome() -> ReconcileOutcome:
    return ReconcileOutcome(action="created", comment=Comment(id=1, body="b"))


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.config == Path("config.yaml")
    assert args.output_file is None
    assert args.edit_comment is None
    assert args.pr_number is None


def test_parse_args_no_edit_comment() -> None:
    assert parse_args(["--no-edit-comment"]).edit_comment is False
    assert parse_args(["--edit-comment"]).edit_comment is True


def test_check_prints_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["--config", str(tmp_path / "absent.yaml"), "--command", "up", "--stack-name", "prod", "--check"])
    assert code == 0
    assert "Config OK: up prod" in capsys.readouterr().out


def test_posts_rendered_output_file(tmp_path: Path) -> None:
    output = tmp_path / "out.txt"
    output.write_text("Resources: 3 unchanged\n")

    with patch("stackreport.main.reconcile_comment", return_value=_outcome()) as reconcile:
        code = main(
            [
                "--config",
                str(tmp_path / "absent.yaml"),
                "--output-file",
                str(output),
                "--command",
                "up",
                "--stack-name",
                "prod",
                "--repo",
                "owner/repo",
                "--pr-number",
                "4",
                "--no-edit-comment",
            ]
        )

    assert code == 0
    reconcile.assert_called_once()
    _, context, rendered = reconcile.call_args[0]
    assert context.repo == "owner/repo"
    assert context.pr_number == 4
    assert "`up` on prod" in rendered.identity_prefix
    assert "Resources: 3 unchanged" in rendered.body
    assert reconcile.call_args[1]["edit_existing"] is False


def test_reads_stdin_when_no_output_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"from stdin")))

    with patch("stackreport.main.reconcile_comment", return_value=_outcome()) as reconcile:
        code = main(["--config", str(tmp_path / "absent.yaml"), "--repo", "owner/repo", "--pr-number", "4"])

    assert code == 0
    rendered = reconcile.call_args[0][2]
    assert "```\nfrom stdin\n```" in rendered.body
    assert reconcile.call_args[1]["edit_existing"] is True


def test_missing_pull_request_exits_1(tmp_path: Path) -> None:
    """No PR in context: run fails before any comment is posted."""
    output = tmp_path / "out.txt"
    output.write_text("OK")

    with patch("stackreport.adapters.github.requests.Session.request") as request:
        code = main(["--config", str(tmp_path / "absent.yaml"), "--output-file", str(output), "--repo", "owner/repo"])

    assert code == 1
    request.assert_not_called()


def test_missing_repository_exits_1(tmp_path: Path) -> None:
    output = tmp_path / "out.txt"
    output.write_text("OK")
    assert main(["--config", str(tmp_path / "absent.yaml"), "--output-file", str(output)]) == 1


def test_stdin_with_invalid_utf8_is_posted(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Non-UTF-8 bytes on stdin are replaced instead of failing the run."""
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(b"Resources: \xff\xfe bad bytes\n")))

    with patch("stackreport.main.reconcile_comment", return_value=_outcome()) as reconcile:
        code = main(["--config", str(tmp_path / "absent.yaml"), "--repo", "o/r", "--pr-number", "1"])

    assert code == 0
    rendered = reconcile.call_args[0][2]
    assert "Resources: \ufffd\ufffd bad bytes" in rendered.body
