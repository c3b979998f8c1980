"""Tests for the ems command-line interface."""
from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from ems.cli.main import cli


def _make_runner() -> CliRunner:
    return CliRunner()


def _lines(output: str) -> list[str]:
    return output.splitlines()


class TestDemo:
    def test_no_command_runs_demo(self, demo_transcript: list[str]) -> None:
        result = _make_runner().invoke(cli, [])
        assert result.exit_code == 0, result.output
        assert _lines(result.output) == demo_transcript

    def test_demo_command(self, demo_transcript: list[str]) -> None:
        result = _make_runner().invoke(cli, ["demo"])
        assert result.exit_code == 0
        assert _lines(result.output) == demo_transcript


class TestPatternCommands:
    def test_describe(self) -> None:
        result = _make_runner().invoke(cli, ["describe", "part-time"])
        assert result.exit_code == 0
        assert result.output == "Displaying part-time employee details.\n"

    def test_describe_unknown_kind(self) -> None:
        result = _make_runner().invoke(cli, ["describe", "contractor"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "contractor" in result.output

    def test_fetch(self) -> None:
        result = _make_runner().invoke(cli, ["fetch", "full-time"])
        assert result.exit_code == 0
        assert _lines(result.output) == [
            "Retrieving employee data from the external HR system.",
            "Displaying full-time employee details.",
        ]

    def test_show_defaults_to_basic(self) -> None:
        result = _make_runner().invoke(cli, ["show", "full-time"])
        assert result.exit_code == 0
        assert _lines(result.output)[0] == "Displaying basic employee details."

    def test_show_advanced(self) -> None:
        result = _make_runner().invoke(cli, ["show", "part-time", "--level", "advanced"])
        assert result.exit_code == 0
        assert _lines(result.output) == [
            "Displaying advanced employee details.",
            "Displaying part-time employee details.",
        ]

    def test_show_unknown_level(self) -> None:
        result = _make_runner().invoke(cli, ["show", "part-time", "-l", "deluxe"])
        assert result.exit_code == 1
        assert "deluxe" in result.output

    def test_process(self) -> None:
        result = _make_runner().invoke(cli, ["process", "COMMAND2", "command3", "Command1"])
        assert result.exit_code == 0
        assert _lines(result.output) == [
            "Processing command 2 in ConcreteEmployeeProcessor2.",
            "Processing command 1 in ConcreteEmployeeProcessor1.",
        ]

    def test_process_unmatched_is_silent(self) -> None:
        result = _make_runner().invoke(cli, ["process", "command3"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_process_custom_chain(self) -> None:
        result = _make_runner().invoke(cli, ["process", "--chain", "handler-1", "command2", "command1"])
        assert result.exit_code == 0
        assert _lines(result.output) == ["Processing command 1 in ConcreteEmployeeProcessor1."]

    def test_process_unknown_processor(self) -> None:
        result = _make_runner().invoke(cli, ["process", "--chain", "handler-1,nope", "command1"])
        assert result.exit_code == 1
        assert "nope" in result.output

    def test_process_empty_chain_rejected(self) -> None:
        result = _make_runner().invoke(cli, ["process", "--chain", ",", "command1"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "at least one processor name" in result.output

    def test_process_requires_a_command(self) -> None:
        result = _make_runner().invoke(cli, ["process"])
        assert result.exit_code == 2


class TestScenarioCommands:
    def test_scenario_prints_yaml(self) -> None:
        result = _make_runner().invoke(cli, ["scenario"])
        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["name"] == "demo"
        assert data["chain"] == ["handler-1", "handler-2"]

    def test_run_file(self, tmp_path: Path) -> None:
        path = tmp_path / "s.yaml"
        path.write_text(
            "employees: {bob: part-time}\nsteps:\n  - show: bob\n    level: basic\n  - process: command2\n",
            encoding="utf-8",
        )
        result = _make_runner().invoke(cli, ["run", str(path)])
        assert result.exit_code == 0, result.output
        assert _lines(result.output) == [
            "Displaying basic employee details.",
            "Displaying part-time employee details.",
            "Processing command 2 in ConcreteEmployeeProcessor2.",
        ]

    def test_run_printed_scenario_matches_demo(self, tmp_path: Path, demo_transcript: list[str]) -> None:
        runner = _make_runner()
        path = tmp_path / "demo.yaml"
        path.write_text(runner.invoke(cli, ["scenario"]).output, encoding="utf-8")
        result = runner.invoke(cli, ["run", str(path)])
        assert _lines(result.output) == demo_transcript

    def test_run_invalid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("steps: [{fetch: ghost}]\n", encoding="utf-8")
        result = _make_runner().invoke(cli, ["run", str(path)])
        assert result.exit_code == 1
        assert "undefined employee 'ghost'" in result.output

    def test_run_missing_file(self, tmp_path: Path) -> None:
        result = _make_runner().invoke(cli, ["run", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
        assert "cannot read scenario" in result.output

    def test_run_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.yaml"
        path.write_bytes(b"name: \xff\xfe\n")
        result = _make_runner().invoke(cli, ["run", str(path)])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "cannot read scenario" in result.output


class TestInfoCommands:
    def test_variants(self) -> None:
        result = _make_runner().invoke(cli, ["variants"])
        assert result.exit_code == 0
        for name in ("full-time", "part-time", "basic", "advanced", "handler-1", "handler-2"):
            assert name in result.output

    def test_version_command(self, expected_version: str) -> None:
        result = _make_runner().invoke(cli, ["version"])
        assert result.exit_code == 0
        assert expected_version in result.output

    def test_help_does_not_run_demo(self) -> None:
        result = _make_runner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "employee-management" in result.output
        assert "Processing command" not in result.output

    @pytest.mark.parametrize("command", ["demo", "run", "scenario", "describe", "fetch", "show", "process", "variants"])
    def test_help_lists_command(self, command: str) -> None:
        result = _make_runner().invoke(cli, ["--help"])
        assert command in result.output

    def test_verbose_still_writes_transcript(self) -> None:
        result = _make_runner().invoke(cli, ["-v", "describe", "full-time"])
        assert result.exit_code == 0
        assert "Displaying full-time employee details." in result.output
