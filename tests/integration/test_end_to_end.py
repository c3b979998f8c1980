"""End-to-end: the demonstration wired by hand, step by step, matches the
built-in scenario and the console entry point.
"""
from __future__ import annotations

import subprocess
import sys

import pytest

from ems.details import AdvancedEmployeeDetails, BasicEmployeeDetails
from ems.employees import FullTimeEmployeeFactory, PartTimeEmployeeFactory
from ems.hr import ExternalHRSystemAdapter
from ems.output import BufferSink
from ems.processors import ConcreteEmployeeProcessor1, ConcreteEmployeeProcessor2
from ems.scenario import run_demo


def _hand_wired(sink: BufferSink) -> None:
    full_time = FullTimeEmployeeFactory().create_employee()
    part_time = PartTimeEmployeeFactory().create_employee()

    ExternalHRSystemAdapter(full_time).retrieve_employee_data(sink)

    BasicEmployeeDetails(full_time).display(sink)
    AdvancedEmployeeDetails(part_time).display(sink)

    processor1 = ConcreteEmployeeProcessor1()
    processor2 = ConcreteEmployeeProcessor2()
    processor1.set_next_processor(processor2)
    processor1.process_command("command1", sink)
    processor1.process_command("command2", sink)
    processor1.process_command("command3", sink)


def test_hand_wired_transcript(sink: BufferSink, demo_transcript: list[str]) -> None:
    _hand_wired(sink)
    assert sink.lines == demo_transcript


def test_scenario_matches_hand_wired(demo_transcript: list[str]) -> None:
    by_hand, by_scenario = BufferSink(), BufferSink()
    _hand_wired(by_hand)
    run_demo(by_scenario)
    assert by_scenario.lines == by_hand.lines == demo_transcript


def test_transcript_has_exactly_eight_lines(sink: BufferSink) -> None:
    run_demo(sink)
    assert len(sink) == 8
    assert sink.text.count("\n") == 8


@pytest.mark.slow
def test_python_dash_m(demo_transcript: list[str]) -> None:
    completed = subprocess.run(
        [sys.executable, "-m", "ems"],
        capture_output=True,
        text=True,
        check=True,
    )
    assert completed.stdout.splitlines() == demo_transcript
    assert completed.stderr == ""
