"""Stackreport entry point.

Reads command output from a file or stdin and posts it on the pull request
of the current run, updating the previous report for the same command and
stack when enabled. Usage: stackreport --output-file preview.txt --command
preview --stack-name dev.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from stackreport.adapters import GitHubAdapter
from stackreport.config import AppConfig, load_config
from stackreport.context import load_pull_request_context
from stackreport.logging import StackReportLogging
from stackreport.report import reconcile_comment, render_report


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments; unset options fall back to config."""
    parser = argparse.ArgumentParser(
        prog="stackreport",
        description="Post or update a command report as a pull request comment",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config.yaml"),
        help="Path to YAML config file",
    )
    parser.add_argument(
        "--output-file",
        "-o",
        type=Path,
        default=None,
        help="File with the command output (default: stdin)",
    )
    parser.add_argument("--command", default=None, help="Command that produced the output")
    parser.add_argument("--stack-name", default=None, help="Stack the command ran against")
    parser.add_argument(
        "--edit-comment",
        dest="edit_comment",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Update the previous report comment instead of posting a new one",
    )
    parser.add_argument("--repo", default=None, help="Repository owner/name (default: GITHUB_REPOSITORY)")
    parser.add_argument("--pr-number", type=int, default=None, help="Pull request number (default: from event)")
    parser.add_argument(
        "--check",
        action="store_true",
        help="Only load and validate config, then exit",
    )
    return parser.parse_args(argv)


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    if args.command is not None:
        config.report.command = args.command
    if args.stack_name is not None:
        config.report.stack_name = args.stack_name
    if args.edit_comment is not None:
        config.report.edit_comment_on_pr = args.edit_comment


def _read_output(path: Path | None) -> str:
    if path is None:
        return sys.stdin.buffer.read().decode("utf-8", errors="replace")
    return path.read_text(encoding="utf-8", errors="replace")


def run(config: AppConfig, args: argparse.Namespace) -> None:
    """Render the output and post it on the PR."""
    log = logging.getLogger("stackreport.main")
    token = config.github_token_resolved
    if not token:
        log.warning("No GitHub token configured; API calls will be unauthenticated")

    context = load_pull_request_context(os.environ, repo=args.repo, pr_number=args.pr_number)
    output = _read_output(args.output_file)
    rendered = render_report(config.report.command, config.report.stack_name, output)
    if rendered.truncated:
        log.warning("Output exceeds the comment size limit and was trimmed")

    adapter = GitHubAdapter(token=token or "", api_url=config.github.api_url)
    outcome = reconcile_comment(
        adapter,
        context,
        rendered,
        edit_existing=config.report.edit_comment_on_pr,
    )
    log.info("Report comment %s (id %s)", outcome.action, outcome.comment.id)


def main(argv: list[str] | None = None) -> int:
    """Entry point for stackreport."""
    args = parse_args(argv)
    config = load_config(args.config)
    _apply_overrides(config, args)
    StackReportLogging(config.logging).setup()

    if args.check:
        print("Config OK:", config.report.command, config.report.stack_name or "-")
        return 0

    try:
        run(config, args)
    except KeyboardInterrupt:
        return 1
    except Exception as e:
        logging.getLogger("stackreport.main").exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
