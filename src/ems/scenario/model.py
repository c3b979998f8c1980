"""Scenario data model.

A ``Scenario`` is the demo script expressed as data: which employees to
create, how to wire the processor chain, and which steps to run in
order.  Scenarios are plain frozen dataclasses; loading from and dumping
to YAML lives in :mod:`ems.scenario.loader`.
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from ems.processors.chain import DEFAULT_CHAIN


class StepAction(Enum):
    """What a step does.

    DESCRIBE
        Write the employee's details line.
    FETCH
        Retrieve the employee through the external HR system adapter.
    SHOW
        Display the employee through a detail presenter of ``level``.
    PROCESS
        Send ``command`` through the processor chain.
    """

    DESCRIBE = "describe"
    FETCH = "fetch"
    SHOW = "show"
    PROCESS = "process"

    @property
    def needs_employee(self) -> bool:
        return self is not StepAction.PROCESS


@dataclass(frozen=True)
class Step:
    """One scenario step.

    Parameters
    ----------
    action:
        What the step does.
    employee:
        Alias of a scenario employee (all actions except PROCESS).
    level:
        Presenter level (SHOW only).
    command:
        Command string (PROCESS only).
    """

    action: StepAction
    employee: str | None = None
    level: str | None = None
    command: str | None = None

    def __str__(self) -> str:
        if self.action is StepAction.PROCESS:
            return f"process {self.command!r}"
        if self.action is StepAction.SHOW:
            return f"show {self.employee} ({self.level})"
        return f"{self.action.value} {self.employee}"


@dataclass(frozen=True)
class Scenario:
    """A complete, runnable script.

    Parameters
    ----------
    employees:
        Mapping of alias to employee kind, e.g. ``{"alice": "full-time"}``.
        Copied into a read-only mapping on construction.
    steps:
        Steps in execution order.
    chain:
        Registered processor names, head first.
    name:
        Label used in logs and error messages.
    """

    employees: Mapping[str, str] = field(default_factory=dict)
    steps: tuple[Step, ...] = ()
    chain: tuple[str, ...] = DEFAULT_CHAIN
    name: str = "scenario"

    def __post_init__(self) -> None:
        object.__setattr__(self, "employees", MappingProxyType(dict(self.employees)))

    def __hash__(self) -> int:
        return hash((frozenset(self.employees.items()), self.steps, self.chain, self.name))
