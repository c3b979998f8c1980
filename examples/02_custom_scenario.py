#!/usr/bin/env python3
"""Example: Custom scenario: ems

Load a scenario from YAML, run it into a buffer, and show what a bad
scenario reports.

Usage:
    python examples/02_custom_scenario.py

Requirements:
    pip install ems-patterns
"""
from __future__ import annotations

import ems
from ems.output import BufferSink
from ems.scenario import ScenarioError, dump_scenario

SCENARIO_YAML = """
name: onboarding
employees:
  alice: full-time
  bob: part-time
chain: [handler-2, handler-1]
steps:
  - describe: bob
  - show: alice
    level: basic
  - fetch: bob
  - process: Command2
  - process: command9
"""

BROKEN_YAML = """
employees:
  alice: intern
steps:
  - describe: alice
"""


def main() -> None:
    scenario = ems.load_scenario(SCENARIO_YAML)
    print(f"Loaded {scenario.name!r}: {len(scenario.steps)} steps, chain {' -> '.join(scenario.chain)}")

    sink = BufferSink()
    ems.run_scenario(scenario, sink)
    for number, line in enumerate(sink.lines, start=1):
        print(f"  {number:>2}  {line}")

    print("\nAs YAML:")
    print(dump_scenario(scenario))

    try:
        ems.load_scenario(BROKEN_YAML)
    except ScenarioError as exc:
        print(f"Rejected broken scenario: {exc}")


if __name__ == "__main__":
    main()
