"""Employee detail presenters (the Bridge abstraction).

A presenter holds a reference to an ``Employee`` (the implementor) and
decides how much to show around it.  The presenter hierarchy and the
employee hierarchy vary independently: any presenter can wrap any
employee variant.

Presenters are registered in ``presenters`` by level::

    from ems.details import create_presenter

    create_presenter("advanced", employee).display()
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ems.output.sink import resolve_sink
from ems.plugins.registry import PluginRegistry

if TYPE_CHECKING:
    from ems.employees.employee import Employee
    from ems.output.sink import OutputSink

ENTRYPOINT_GROUP = "ems.presenters"


class EmployeeDetails(ABC):
    """Write a header line, then the wrapped employee's details.

    Parameters
    ----------
    employee:
        The employee whose details are shown.
    """

    def __init__(self, employee: Employee) -> None:
        self._employee = employee

    @property
    def employee(self) -> Employee:
        return self._employee

    @property
    @abstractmethod
    def header(self) -> str:
        """Line written before the employee's details."""

    def display(self, sink: OutputSink | None = None) -> None:
        out = resolve_sink(sink)
        out.write_line(self.header)
        self._employee.describe(out)

    def show(self, sink: OutputSink | None = None) -> None:
        """Alias of :meth:`display`."""
        self.display(sink)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._employee!r})"


presenters: PluginRegistry[EmployeeDetails] = PluginRegistry(EmployeeDetails, "presenters")


@presenters.register("basic")
class BasicEmployeeDetails(EmployeeDetails):
    @property
    def header(self) -> str:
        return "Displaying basic employee details."


@presenters.register("advanced")
class AdvancedEmployeeDetails(EmployeeDetails):
    @property
    def header(self) -> str:
        return "Displaying advanced employee details."


def create_presenter(level: str, employee: Employee) -> EmployeeDetails:
    """Wrap ``employee`` in the presenter registered for ``level``.

    Raises
    ------
    ems.plugins.PluginNotFoundError
        If no presenter is registered for ``level``.
    """
    return presenters.get(level)(employee)
