"""Execute a ``Scenario`` against an output sink.

The runner creates every employee once through its factory, builds the
processor chain, then dispatches each step to the handler for its
action.  The scenario is validated before anything is written, so a
bad scenario produces an error and no partial transcript.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ems.details.presenter import create_presenter
from ems.employees.factory import create_employee
from ems.hr.adapter import ExternalHRSystemAdapter
from ems.output.sink import resolve_sink
from ems.processors.chain import ProcessorChain, build_chain
from ems.scenario.loader import validate_scenario
from ems.scenario.model import Scenario, Step, StepAction

if TYPE_CHECKING:
    from ems.employees.employee import Employee
    from ems.output.sink import OutputSink

logger = logging.getLogger(__name__)


class ScenarioRunner:
    """Run the steps of ``scenario`` in order.

    Parameters
    ----------
    scenario:
        The scenario to run.  Validated on construction.

    Raises
    ------
    ems.scenario.ScenarioError
        If the scenario refers to unknown employees, kinds, levels or
        processors.
    """

    def __init__(self, scenario: Scenario) -> None:
        validate_scenario(scenario)
        self._scenario = scenario
        self._handlers: dict[StepAction, Callable[[Step, OutputSink], None]] = {
            StepAction.DESCRIBE: self._describe,
            StepAction.FETCH: self._fetch,
            StepAction.SHOW: self._show,
            StepAction.PROCESS: self._process,
        }
        self._employees: dict[str, Employee] = {}
        self._chain: ProcessorChain | None = None

    @property
    def scenario(self) -> Scenario:
        return self._scenario

    def run(self, sink: OutputSink | None = None) -> None:
        """Create the scenario's employees and chain, then run every step."""
        out = resolve_sink(sink)
        self._employees = {
            alias: create_employee(kind) for alias, kind in self._scenario.employees.items()
        }
        self._chain = build_chain(self._scenario.chain)
        logger.debug(
            "Running scenario %r: %d employee(s), %d step(s)",
            self._scenario.name,
            len(self._employees),
            len(self._scenario.steps),
        )
        for step in self._scenario.steps:
            logger.debug("Step: %s", step)
            self._handlers[step.action](step, out)

    # ------------------------------------------------------------------
    # Step handlers
    # ------------------------------------------------------------------

    def _employee(self, step: Step) -> Employee:
        assert step.employee is not None
        return self._employees[step.employee]

    def _describe(self, step: Step, out: OutputSink) -> None:
        self._employee(step).describe(out)

    def _fetch(self, step: Step, out: OutputSink) -> None:
        ExternalHRSystemAdapter(self._employee(step)).retrieve_employee_data(out)

    def _show(self, step: Step, out: OutputSink) -> None:
        assert step.level is not None
        create_presenter(step.level, self._employee(step)).display(out)

    def _process(self, step: Step, out: OutputSink) -> None:
        assert self._chain is not None and step.command is not None
        self._chain.process(step.command, out)


def run_scenario(scenario: Scenario, sink: OutputSink | None = None) -> None:
    ScenarioRunner(scenario).run(sink)
