"""Adapter exposing an ``Employee`` as an external HR system.

The external HR system expects ``retrieve_employee_data()``; employees
only know ``describe()``.  ``ExternalHRSystemAdapter`` bridges the two
by writing a fixed preamble and forwarding to the wrapped employee.
No data is translated on the way through.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from ems.output.sink import resolve_sink

if TYPE_CHECKING:
    from ems.employees.employee import Employee
    from ems.output.sink import OutputSink

HR_PREAMBLE = "Retrieving employee data from the external HR system."


@runtime_checkable
class ExternalHRSystem(Protocol):
    """Interface of the external HR system."""

    def retrieve_employee_data(self, sink: OutputSink | None = None) -> None:
        ...  # pragma: no cover


class ExternalHRSystemAdapter:
    """Serve ``employee`` through the ``ExternalHRSystem`` interface.

    Parameters
    ----------
    employee:
        The employee to forward to.
    """

    def __init__(self, employee: Employee) -> None:
        self._employee = employee

    @property
    def employee(self) -> Employee:
        return self._employee

    def retrieve_employee_data(self, sink: OutputSink | None = None) -> None:
        """Write the HR preamble, then the employee's details."""
        out = resolve_sink(sink)
        out.write_line(HR_PREAMBLE)
        self._employee.describe(out)

    def fetch(self, sink: OutputSink | None = None) -> None:
        """Alias of :meth:`retrieve_employee_data`."""
        self.retrieve_employee_data(sink)

    def __repr__(self) -> str:
        return f"ExternalHRSystemAdapter({self._employee!r})"
