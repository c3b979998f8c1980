"""Command processors (chain of responsibility handlers).

Each processor recognises one command literal.  ``process_command``
compares the incoming command against it ignoring case; on a match the
processor writes its message and stops, otherwise it forwards the
command unchanged to the next processor.  A command that reaches the
end of the chain is dropped without output, error or log record.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ems.output.sink import resolve_sink
from ems.plugins.registry import PluginRegistry

if TYPE_CHECKING:
    from ems.output.sink import OutputSink

ENTRYPOINT_GROUP = "ems.processors"


class EmployeeProcessor(ABC):
    """A single handler in a processor chain."""

    def __init__(self) -> None:
        self._next: EmployeeProcessor | None = None

    @property
    @abstractmethod
    def command(self) -> str:
        """The command literal this processor handles."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Line written when the command is handled."""

    @property
    def next_processor(self) -> EmployeeProcessor | None:
        return self._next

    def set_next_processor(self, processor: EmployeeProcessor | None) -> None:
        self._next = processor

    @property
    def is_terminal(self) -> bool:
        return self._next is None

    def matches(self, command: str) -> bool:
        return command.casefold() == self.command.casefold()

    def process_command(self, command: str, sink: OutputSink | None = None) -> None:
        """Handle ``command`` here or pass it down the chain."""
        if self.matches(command):
            resolve_sink(sink).write_line(self.message)
        elif self._next is not None:
            self._next.process_command(command, sink)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(command={self.command!r})"


processors: PluginRegistry[EmployeeProcessor] = PluginRegistry(EmployeeProcessor, "processors")


@processors.register("handler-1")
class ConcreteEmployeeProcessor1(EmployeeProcessor):
    @property
    def command(self) -> str:
        return "command1"

    @property
    def message(self) -> str:
        return "Processing command 1 in ConcreteEmployeeProcessor1."


@processors.register("handler-2")
class ConcreteEmployeeProcessor2(EmployeeProcessor):
    @property
    def command(self) -> str:
        return "command2"

    @property
    def message(self) -> str:
        return "Processing command 2 in ConcreteEmployeeProcessor2."
