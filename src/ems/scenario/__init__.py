"""Scenarios: the demo script as data, with YAML loading and a runner."""
from __future__ import annotations

from ems.scenario.demo import DEFAULT_SCENARIO, run_demo
from ems.scenario.errors import ScenarioError
from ems.scenario.loader import (
    dump_scenario,
    load_scenario,
    load_scenario_file,
    validate_scenario,
)
from ems.scenario.model import Scenario, Step, StepAction
from ems.scenario.runner import ScenarioRunner, run_scenario

__all__ = [
    "Scenario",
    "Step",
    "StepAction",
    "ScenarioError",
    "ScenarioRunner",
    "DEFAULT_SCENARIO",
    "load_scenario",
    "load_scenario_file",
    "dump_scenario",
    "validate_scenario",
    "run_scenario",
    "run_demo",
]
