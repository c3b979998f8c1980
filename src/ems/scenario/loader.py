"""Load, validate and dump scenarios as YAML.

Scenario files look like this::

    name: demo
    employees:
      full_time: full-time
      part_time: part-time
    chain: [handler-1, handler-2]
    steps:
      - fetch: full_time
      - show: full_time
        level: basic
      - process: command1

Each step is a mapping with exactly one action key (``describe``,
``fetch``, ``show`` or ``process``).  ``show`` also takes ``level``.
``chain`` is optional and defaults to ``[handler-1, handler-2]``.

Usage
-----
::

    from ems.scenario import load_scenario, dump_scenario

    scenario = load_scenario(text)
    text2 = dump_scenario(scenario)
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from ems.details.presenter import presenters
from ems.employees.factory import employee_factories
from ems.processors.chain import DEFAULT_CHAIN
from ems.processors.processor import processors
from ems.scenario.errors import ScenarioError
from ems.scenario.model import Scenario, Step, StepAction

logger = logging.getLogger(__name__)

_ACTION_KEYS = {action.value: action for action in StepAction}


# ---------------------------------------------------------------------------
# Parsing (YAML -> model)
# ---------------------------------------------------------------------------


def load_scenario(text: str, source: str | None = None) -> Scenario:
    """Parse and validate a YAML scenario.

    Parameters
    ----------
    text:
        YAML source.
    source:
        Optional file name used in error messages.

    Raises
    ------
    ScenarioError
        If the YAML is malformed or the scenario is invalid.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ScenarioError(f"invalid YAML: {exc}", source=source) from exc

    scenario = scenario_from_dict(data, source=source)
    validate_scenario(scenario, source=source)
    logger.debug("Loaded scenario %r with %d step(s)", scenario.name, len(scenario.steps))
    return scenario


def load_scenario_file(path: str | Path) -> Scenario:
    """Read and parse the scenario file at ``path``."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ScenarioError(f"cannot read scenario: {exc.strerror or exc}", source=str(path)) from exc
    except UnicodeDecodeError as exc:
        raise ScenarioError(f"cannot read scenario: {exc}", source=str(path)) from exc
    return load_scenario(text, source=str(path))


def scenario_from_dict(data: Any, source: str | None = None) -> Scenario:
    if not isinstance(data, dict):
        raise ScenarioError("a scenario must be a mapping", source=source)

    unknown = set(data) - {"name", "employees", "chain", "steps"}
    if unknown:
        raise ScenarioError(f"unknown key(s): {', '.join(sorted(map(str, unknown)))}", source=source)

    employees = data.get("employees") or {}
    if not isinstance(employees, dict):
        raise ScenarioError("'employees' must map aliases to kinds", "employees", source)
    for alias, kind in employees.items():
        if not isinstance(alias, str):
            raise ScenarioError(f"employee alias {alias!r} must be a string", "employees", source)
        if not isinstance(kind, str):
            raise ScenarioError("employee kind must be a string", f"employees.{alias}", source)

    name = data.get("name", "scenario")
    if not isinstance(name, str):
        raise ScenarioError("'name' must be a string", "name", source)

    chain = data.get("chain", list(DEFAULT_CHAIN))
    if chain is None:
        chain = []
    if not isinstance(chain, list) or not all(isinstance(n, str) for n in chain):
        raise ScenarioError("'chain' must be a list of processor names", "chain", source)

    raw_steps = data.get("steps") or []
    if not isinstance(raw_steps, list):
        raise ScenarioError("'steps' must be a list", "steps", source)

    return Scenario(
        employees=employees,
        steps=tuple(_step_from_dict(raw, f"steps[{i}]", source) for i, raw in enumerate(raw_steps)),
        chain=tuple(chain),
        name=name,
    )


def _step_from_dict(raw: Any, location: str, source: str | None) -> Step:
    if not isinstance(raw, dict):
        raise ScenarioError("a step must be a mapping", location, source)

    actions = [key for key in raw if key in _ACTION_KEYS]
    if len(actions) != 1:
        raise ScenarioError(
            f"a step needs exactly one of {', '.join(_ACTION_KEYS)}",
            location,
            source,
        )
    action = _ACTION_KEYS[actions[0]]
    value = raw[actions[0]]
    allowed = {action.value, "level"} if action is StepAction.SHOW else {action.value}
    extra = set(raw) - allowed
    if extra:
        raise ScenarioError(f"unexpected key(s): {', '.join(sorted(map(str, extra)))}", location, source)

    if action is StepAction.PROCESS:
        if not isinstance(value, str):
            raise ScenarioError("'process' needs a command string", location, source)
        return Step(action, command=value)

    if not isinstance(value, str) or not value:
        raise ScenarioError(f"{action.value!r} needs an employee alias", location, source)
    if action is StepAction.SHOW:
        level = raw.get("level")
        if not isinstance(level, str):
            raise ScenarioError("'show' needs a 'level'", location, source)
        return Step(action, employee=value, level=level)
    return Step(action, employee=value)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_scenario(scenario: Scenario, source: str | None = None) -> None:
    """Check that every name in ``scenario`` resolves.

    Raises
    ------
    ScenarioError
        On the first undefined alias or unregistered kind, level or
        processor name.
    """
    for alias, kind in scenario.employees.items():
        if kind not in employee_factories:
            raise ScenarioError(
                f"unknown employee kind {kind!r} "
                f"(expected one of: {', '.join(employee_factories.list_plugins())})",
                f"employees.{alias}",
                source,
            )

    for i, name in enumerate(scenario.chain):
        if name not in processors:
            raise ScenarioError(
                f"unknown processor {name!r} "
                f"(expected one of: {', '.join(processors.list_plugins())})",
                f"chain[{i}]",
                source,
            )

    for i, step in enumerate(scenario.steps):
        location = f"steps[{i}]"
        if step.action.needs_employee and step.employee not in scenario.employees:
            raise ScenarioError(f"undefined employee {step.employee!r}", location, source)
        if step.action is StepAction.SHOW and step.level not in presenters:
            raise ScenarioError(
                f"unknown level {step.level!r} "
                f"(expected one of: {', '.join(presenters.list_plugins())})",
                location,
                source,
            )
        if step.action is StepAction.PROCESS and step.command is None:
            raise ScenarioError("'process' needs a command string", location, source)


# ---------------------------------------------------------------------------
# Serialization (model -> YAML)
# ---------------------------------------------------------------------------


def scenario_to_dict(scenario: Scenario) -> dict[str, object]:
    steps: list[dict[str, object]] = []
    for step in scenario.steps:
        if step.action is StepAction.PROCESS:
            steps.append({"process": step.command})
        elif step.action is StepAction.SHOW:
            steps.append({"show": step.employee, "level": step.level})
        else:
            steps.append({step.action.value: step.employee})
    return {
        "name": scenario.name,
        "employees": dict(scenario.employees),
        "chain": list(scenario.chain),
        "steps": steps,
    }


def dump_scenario(scenario: Scenario) -> str:
    """Serialize ``scenario`` to YAML in the format :func:`load_scenario` reads."""
    return yaml.safe_dump(scenario_to_dict(scenario), default_flow_style=False, sort_keys=False)
