"""Tests for the click entry point."""

import logging
from unittest.mock import patch

from click.testing import CliRunner

from approval_count.cli import DEFAULT_ORG, DEFAULT_REPO, DEFAULT_TEAM, main
from approval_count.core.github import GitHubAPIError
from approval_count.display.picker import PickerError


def _invoke(args=(), env=None):
    runner = CliRunner()
    with patch("approval_count.cli.check_gh_cli"), \
         patch("approval_count.commands.approvals.run_approvals") as mock_run:
        result = runner.invoke(main, list(args), env=env)
    return result, mock_run


def test_defaults():
    result, mock_run = _invoke()
    assert result.exit_code == 0
    ctx = mock_run.call_args[0][0]
    assert ctx.org == DEFAULT_ORG
    assert ctx.repo == f"{DEFAULT_ORG}/{DEFAULT_REPO}"
    assert ctx.team == DEFAULT_TEAM
    assert ctx.months == 1
    assert ctx.mode == "auto"


def test_options():
    result, mock_run = _invoke(["--org", "acme", "--repo", "other/widgets", "--team", "core",
                                "--months", "2", "--mode", "table", "--json"])
    assert result.exit_code == 0
    ctx = mock_run.call_args[0][0]
    assert (ctx.org, ctx.owner, ctx.name, ctx.team) == ("acme", "other", "widgets", "core")
    assert ctx.months == 2
    assert ctx.mode == "table"
    assert ctx.json_output is True


def test_environment_overrides():
    result, mock_run = _invoke(env={"APPROVAL_COUNT_ORG": "acme", "APPROVAL_COUNT_TEAM": "core"})
    assert result.exit_code == 0
    ctx = mock_run.call_args[0][0]
    assert ctx.org == "acme"
    assert ctx.team == "core"


def test_months_must_be_positive():
    result, mock_run = _invoke(["--months", "0"])
    assert result.exit_code == 2
    mock_run.assert_not_called()


def test_api_error_exits_nonzero():
    runner = CliRunner()
    with patch("approval_count.cli.check_gh_cli"), \
         patch("approval_count.commands.approvals.run_approvals",
               side_effect=GitHubAPIError("GraphQL query failed: HTTP 401")):
        result = runner.invoke(main, [])
    assert result.exit_code == 1


def test_gh_not_authenticated_exits_nonzero():
    runner = CliRunner()
    with patch("approval_count.cli.check_gh_cli",
               side_effect=GitHubAPIError("gh CLI is not authenticated")), \
         patch("approval_count.commands.approvals.run_approvals") as mock_run:
        result = runner.invoke(main, [])
    assert result.exit_code == 1
    mock_run.assert_not_called()


def test_picker_error_exits_nonzero():
    runner = CliRunner()
    with patch("approval_count.cli.check_gh_cli"), \
         patch("approval_count.commands.approvals.run_approvals",
               side_effect=PickerError("fzf not found on PATH")):
        result = runner.invoke(main, [])
    assert result.exit_code == 1


def test_verbose_enables_debug_logging():
    runner = CliRunner()
    with patch("approval_count.cli.check_gh_cli"), \
         patch("approval_count.commands.approvals.run_approvals") as mock_run, \
         patch("approval_count.cli.logging.basicConfig") as mock_logging:
        result = runner.invoke(main, ["-v"])

    assert result.exit_code == 0
    assert mock_logging.call_args.kwargs["level"] == logging.DEBUG
    assert mock_run.call_args[0][0].verbose is True


def test_default_logging_level_is_warning():
    runner = CliRunner()
    with patch("approval_count.cli.check_gh_cli"), \
         patch("approval_count.commands.approvals.run_approvals"), \
         patch("approval_count.cli.logging.basicConfig") as mock_logging:
        result = runner.invoke(main, [])

    assert result.exit_code == 0
    assert mock_logging.call_args.kwargs["level"] == logging.WARNING


def test_format_parquet_option():
    result, mock_run = _invoke(["--format", "parquet"])
    assert result.exit_code == 0
    assert mock_run.call_args[0][0].fmt == "parquet"
