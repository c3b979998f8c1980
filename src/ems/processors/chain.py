"""Assembling processors into a chain.

``link`` wires processors by setting each one's next reference to its
right-hand neighbour.  ``ProcessorChain`` keeps the processors as an
ordered list and does the wiring for the caller::

    from ems.processors import build_chain

    chain = build_chain()            # handler-1 -> handler-2
    chain.process("COMMAND2")        # handled by handler-2
    chain.process("command3")        # dropped
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import TYPE_CHECKING

from ems.processors.processor import EmployeeProcessor, processors

if TYPE_CHECKING:
    from ems.output.sink import OutputSink

logger = logging.getLogger(__name__)

DEFAULT_CHAIN: tuple[str, ...] = ("handler-1", "handler-2")


def link(*chain: EmployeeProcessor) -> EmployeeProcessor | None:
    """Wire ``chain`` left to right and return its head.

    The last processor becomes terminal.  Returns ``None`` when no
    processors are given.
    """
    for current, following in zip(chain, chain[1:]):
        current.set_next_processor(following)
    if chain:
        chain[-1].set_next_processor(None)
        return chain[0]
    return None


class ProcessorChain:
    """An ordered, wired sequence of processors.

    Parameters
    ----------
    members:
        Processors in the order commands should visit them.  The same
        instance may not appear twice, since that would make the chain
        cyclic.
    """

    def __init__(self, members: Iterable[EmployeeProcessor]) -> None:
        self._members: list[EmployeeProcessor] = list(members)
        if len({id(p) for p in self._members}) != len(self._members):
            raise ValueError("A processor instance may appear only once in a chain.")
        self._head = link(*self._members)
        logger.debug("Wired processor chain: %s", " -> ".join(map(repr, self._members)) or "<empty>")

    @property
    def head(self) -> EmployeeProcessor | None:
        return self._head

    @property
    def names(self) -> list[str]:
        return [type(p).__name__ for p in self._members]

    def process(self, command: str, sink: OutputSink | None = None) -> None:
        """Send ``command`` to the head of the chain."""
        if self._head is not None:
            self._head.process_command(command, sink)

    def process_all(self, commands: Iterable[str], sink: OutputSink | None = None) -> None:
        for command in commands:
            self.process(command, sink)

    def __iter__(self) -> Iterator[EmployeeProcessor]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def __repr__(self) -> str:
        return f"ProcessorChain({self.names})"


def build_chain(names: Sequence[str] = DEFAULT_CHAIN) -> ProcessorChain:
    """Instantiate the registered processors ``names`` and wire them in order.

    Raises
    ------
    ems.plugins.PluginNotFoundError
        If any name is not a registered processor.
    """
    return ProcessorChain(processors.get(name)() for name in names)
