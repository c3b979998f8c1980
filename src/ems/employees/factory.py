"""Abstract factory for employees.

Each concrete ``EmployeeFactory`` is hard-wired to one ``Employee``
variant.  Factories are registered in ``employee_factories`` under the
variant's tag so callers can pick one by name::

    from ems.employees import create_employee

    employee = create_employee("part-time")
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ems.employees.employee import Employee, FullTimeEmployee, PartTimeEmployee
from ems.plugins.registry import PluginRegistry

logger = logging.getLogger(__name__)

ENTRYPOINT_GROUP = "ems.employee_factories"


class EmployeeFactory(ABC):
    """Creates employees of one fixed variant."""

    @abstractmethod
    def create_employee(self) -> Employee:
        """Return a new employee."""


employee_factories: PluginRegistry[EmployeeFactory] = PluginRegistry(
    EmployeeFactory, "employee_factories"
)


@employee_factories.register("full-time")
class FullTimeEmployeeFactory(EmployeeFactory):
    def create_employee(self) -> Employee:
        return FullTimeEmployee()


@employee_factories.register("part-time")
class PartTimeEmployeeFactory(EmployeeFactory):
    def create_employee(self) -> Employee:
        return PartTimeEmployee()


def get_factory(kind: str) -> EmployeeFactory:
    """Return a factory instance for the variant tagged ``kind``.

    Raises
    ------
    ems.plugins.PluginNotFoundError
        If no factory is registered for ``kind``.
    """
    return employee_factories.get(kind)()


def create_employee(kind: str) -> Employee:
    """Create a new employee of variant ``kind`` through its factory."""
    employee = get_factory(kind).create_employee()
    logger.debug("Created %r employee %r", kind, employee)
    return employee
