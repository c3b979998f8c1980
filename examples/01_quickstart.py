#!/usr/bin/env python3
"""Example: Quickstart: ems

Each pattern once, through the public API, then the built-in demo.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install ems-patterns
"""
from __future__ import annotations

import ems
from ems.details import create_presenter
from ems.hr import ExternalHRSystemAdapter


def main() -> None:
    print(f"ems version: {ems.__version__}\n")

    # Step 1: Abstract factory
    full_time = ems.create_employee("full-time")
    part_time = ems.create_employee("part-time")

    # Step 2: Adapter
    ExternalHRSystemAdapter(part_time).retrieve_employee_data()

    # Step 3: Bridge
    create_presenter("advanced", full_time).display()

    # Step 4: Chain of responsibility; "command3" is dropped
    chain = ems.build_chain()
    for command in ("COMMAND1", "command2", "command3"):
        chain.process(command)

    print("\nBuilt-in demo:")
    ems.run_demo()


if __name__ == "__main__":
    main()
