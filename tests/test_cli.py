# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from taskbook.cli.main import cli


def _invoke(runner: CliRunner, *args: str):
    return runner.invoke(cli, list(args), catch_exceptions=False)


def _add_defaults(runner: CliRunner) -> None:
    assert _invoke(runner, "add", "Write report", "Quarterly summary", "2", "To Do", "Work").exit_code == 0
    assert _invoke(runner, "add", "Buy milk", "", "1", "To Do", "Home").exit_code == 0


def test_add_then_list(runner: CliRunner, cli_env: Path) -> None:
    result = _invoke(runner, "add", "Write report", "Quarterly summary", "2", "To Do", "Work")
    assert result.exit_code == 0
    assert "Task added successfully!" in result.output

    result = _invoke(runner, "list")
    assert result.exit_code == 0
    assert "Task 1: Write report" in result.output
    assert "Description: Quarterly summary" in result.output
    assert "Priority:    2" in result.output
    assert "Status:      To Do" in result.output
    assert "Project:     Work" in result.output


def test_state_persists_between_invocations(runner: CliRunner, cli_env: Path) -> None:
    _add_defaults(runner)

    data = json.loads(cli_env.read_text("utf-8"))
    assert [d["title"] for d in data] == ["Write report", "Buy milk"]


def test_example_scenario(runner: CliRunner, cli_env: Path) -> None:
    _add_defaults(runner)

    result = _invoke(runner, "list-by-priority", "--priority", "1")
    assert "Buy milk" in result.output
    assert "Write report" not in result.output

    assert _invoke(runner, "update", "Write report", "--status", "Done").exit_code == 0

    result = _invoke(runner, "list-by-status", "--status", "Done")
    assert "Task 1: Write report" in result.output
    assert "Description: Quarterly summary" in result.output
    assert "Buy milk" not in result.output


def test_empty_filter_prints_no_tasks(runner: CliRunner, cli_env: Path) -> None:
    _add_defaults(runner)

    result = _invoke(runner, "list-by-project", "--project", "Garden")

    assert result.exit_code == 0
    assert "No tasks found." in result.output


def test_search_is_case_insensitive(runner: CliRunner, cli_env: Path) -> None:
    _add_defaults(runner)

    result = _invoke(runner, "search", "QUARTERLY")

    assert result.exit_code == 0
    assert "Write report" in result.output
    assert "Buy milk" not in result.output


def test_duplicate_add_fails_and_keeps_file(runner: CliRunner, cli_env: Path) -> None:
    _add_defaults(runner)
    before = cli_env.read_text("utf-8")

    result = _invoke(runner, "add", "Buy milk", "x", "3", "Done", "Home")

    assert result.exit_code == 4
    assert "Error:" in result.output
    assert cli_env.read_text("utf-8") == before


def test_remove_missing_exits_not_found(runner: CliRunner, cli_env: Path) -> None:
    result = _invoke(runner, "remove", "Nope")

    assert result.exit_code == 3
    assert "Task not found" in result.output
    assert not cli_env.exists()


def test_remove_existing(runner: CliRunner, cli_env: Path) -> None:
    _add_defaults(runner)

    result = _invoke(runner, "remove", "Buy milk")

    assert result.exit_code == 0
    assert "Task removed successfully!" in result.output
    assert [d["title"] for d in json.loads(cli_env.read_text("utf-8"))] == ["Write report"]


def test_invalid_priority_exits_invalid_input(runner: CliRunner, cli_env: Path) -> None:
    result = _invoke(runner, "add", "t", "d", "high", "To Do", "Work")

    assert result.exit_code == 2
    assert "Invalid priority" in result.output
    assert not cli_env.exists()


def test_update_without_fields_exits_invalid_input(runner: CliRunner, cli_env: Path) -> None:
    _add_defaults(runner)

    result = _invoke(runner, "update", "Buy milk")

    assert result.exit_code == 2
    assert "at least one" in result.output


def test_update_priority_only(runner: CliRunner, cli_env: Path) -> None:
    _add_defaults(runner)

    result = _invoke(runner, "update", "Write report", "--priority", "5")
    assert result.exit_code == 0

    record = json.loads(cli_env.read_text("utf-8"))[0]
    assert record == {
        "title": "Write report",
        "description": "Quarterly summary",
        "priority": 5,
        "status": "To Do",
        "category": "Work",
    }


def test_malformed_file_exits_persistence_error(runner: CliRunner, cli_env: Path) -> None:
    cli_env.write_text("{broken", "utf-8")

    result = _invoke(runner, "list")

    assert result.exit_code == 5
    assert "not valid JSON" in result.output
    assert cli_env.read_text("utf-8") == "{broken"


def test_missing_required_argument_is_usage_error(runner: CliRunner, cli_env: Path) -> None:
    result = _invoke(runner, "list-by-status")

    assert result.exit_code == 2


def test_file_option_overrides_env(runner: CliRunner, cli_env: Path, tmp_path: Path) -> None:
    other = tmp_path / "other.json"

    result = _invoke(runner, "--file", str(other), "add", "t", "d", "1", "s", "p")

    assert result.exit_code == 0
    assert other.exists()
    assert not cli_env.exists()


def test_version(runner: CliRunner) -> None:
    result = _invoke(runner, "--version")

    assert result.exit_code == 0
    assert "taskbook" in result.output


def test_add_with_undecodable_argument_exits_invalid_input(
    runner: CliRunner, cli_env: Path
) -> None:
    result = _invoke(runner, "add", "bad\udcff", "d", "1", "s", "c")

    assert result.exit_code == 2
    assert "Error:" in result.output
    assert list(cli_env.parent.glob("tasks.json*")) == []


def test_unusable_data_dir_does_not_stop_commands(
    runner: CliRunner, cli_env: Path, tmp_path: Path, monkeypatch
) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", "utf-8")
    monkeypatch.setenv("TASKBOOK_DATA_DIR", str(blocker / "data"))
    monkeypatch.setenv("TASKBOOK_LOG_TO_FILE", "true")

    result = _invoke(runner, "list")

    assert result.exit_code == 0
    assert "No tasks found." in result.output
