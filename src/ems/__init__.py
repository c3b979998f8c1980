"""ems: design patterns on a small employee-management domain.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import ems

    # Run the built-in demonstration (prints to stdout)
    ems.run_demo()

    # Abstract factory: pick an employee variant by tag
    employee = ems.create_employee("part-time")
    employee.describe()

    # Chain of responsibility: handler-1 -> handler-2
    chain = ems.build_chain()
    chain.process("COMMAND2")

    # Scenarios from YAML
    scenario = ems.load_scenario(text)
    ems.run_scenario(scenario)

    ems.__version__
    '0.1.0'
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from ems.employees.employee import Employee
    from ems.output.sink import OutputSink
    from ems.processors.chain import ProcessorChain
    from ems.scenario.model import Scenario


def create_employee(kind: str) -> "Employee":
    """Create an employee of variant ``kind`` (``"full-time"`` or ``"part-time"``).

    Raises
    ------
    ems.plugins.PluginNotFoundError
        If no factory is registered for ``kind``.
    """
    from ems.employees.factory import create_employee as _create_employee

    return _create_employee(kind)


def build_chain(names: Sequence[str] | None = None) -> "ProcessorChain":
    """Build a wired processor chain from registered processor names.

    Parameters
    ----------
    names:
        Processor names, head first.  Defaults to
        ``("handler-1", "handler-2")``.
    """
    from ems.processors.chain import DEFAULT_CHAIN
    from ems.processors.chain import build_chain as _build_chain

    return _build_chain(DEFAULT_CHAIN if names is None else names)


def run_demo(sink: "OutputSink | None" = None) -> None:
    """Run the built-in demonstration, writing to ``sink`` (stdout by default)."""
    from ems.scenario.demo import run_demo as _run_demo

    _run_demo(sink)


def load_scenario(text: str) -> "Scenario":
    """Parse and validate a YAML scenario.

    Raises
    ------
    ems.scenario.ScenarioError
        If the scenario is malformed or refers to unknown names.
    """
    from ems.scenario.loader import load_scenario as _load_scenario

    return _load_scenario(text)


def run_scenario(scenario: "Scenario", sink: "OutputSink | None" = None) -> None:
    """Run ``scenario``, writing to ``sink`` (stdout by default)."""
    from ems.scenario.runner import run_scenario as _run_scenario

    _run_scenario(scenario, sink)


def load_plugins() -> int:
    """Register variants contributed by installed packages through entry-points.

    Returns
    -------
    int
        The number of variants newly registered across all registries.
    """
    from ems.details import presenter
    from ems.employees import factory
    from ems.processors import processor

    return sum(
        module_registry.load_entrypoints(group)
        for module_registry, group in (
            (factory.employee_factories, factory.ENTRYPOINT_GROUP),
            (presenter.presenters, presenter.ENTRYPOINT_GROUP),
            (processor.processors, processor.ENTRYPOINT_GROUP),
        )
    )


__all__ = [
    "__version__",
    "create_employee",
    "build_chain",
    "run_demo",
    "load_scenario",
    "run_scenario",
    "load_plugins",
]
