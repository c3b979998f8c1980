"""Employee variants.

An ``Employee`` has exactly one capability: write a fixed line
describing itself to an output sink.  Variants carry no state, so two
instances of the same variant are interchangeable.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ems.output.sink import resolve_sink

if TYPE_CHECKING:
    from ems.output.sink import OutputSink


class Employee(ABC):
    """Abstract employee.

    Subclasses provide :attr:`kind` and :attr:`details`; ``describe``
    writes :attr:`details` to the sink unchanged.
    """

    @property
    @abstractmethod
    def kind(self) -> str:
        """Variant tag, e.g. ``"full-time"``."""

    @property
    @abstractmethod
    def details(self) -> str:
        """The line written by :meth:`describe`."""

    def describe(self, sink: OutputSink | None = None) -> None:
        """Write this employee's details line to ``sink`` (stdout by default)."""
        resolve_sink(sink).write_line(self.details)

    def display_details(self, sink: OutputSink | None = None) -> None:
        """Alias of :meth:`describe`."""
        self.describe(sink)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FullTimeEmployee(Employee):
    @property
    def kind(self) -> str:
        return "full-time"

    @property
    def details(self) -> str:
        return "Displaying full-time employee details."


class PartTimeEmployee(Employee):
    @property
    def kind(self) -> str:
        return "part-time"

    @property
    def details(self) -> str:
        return "Displaying part-time employee details."
