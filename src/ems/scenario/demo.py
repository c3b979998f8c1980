"""The built-in demonstration.

``DEFAULT_SCENARIO`` walks through every pattern once: a full-time and a
part-time employee from their factories, the HR adapter, both detail
presenters, then three commands through ``handler-1 -> handler-2``.
The last command matches no processor and produces no output.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from ems.scenario.model import Scenario, Step, StepAction
from ems.scenario.runner import run_scenario

if TYPE_CHECKING:
    from ems.output.sink import OutputSink

DEFAULT_SCENARIO = Scenario(
    name="demo",
    employees={"full_time": "full-time", "part_time": "part-time"},
    chain=("handler-1", "handler-2"),
    steps=(
        Step(StepAction.FETCH, employee="full_time"),
        Step(StepAction.SHOW, employee="full_time", level="basic"),
        Step(StepAction.SHOW, employee="part_time", level="advanced"),
        Step(StepAction.PROCESS, command="command1"),
        Step(StepAction.PROCESS, command="command2"),
        Step(StepAction.PROCESS, command="command3"),
    ),
)


def run_demo(sink: OutputSink | None = None) -> None:
    """Run ``DEFAULT_SCENARIO``, writing its transcript to ``sink`` (stdout by default)."""
    run_scenario(DEFAULT_SCENARIO, sink)
