"""Output sinks: where employee, adapter, presenter and processor lines go.

Every operation that "prints" in ems writes whole lines to an
``OutputSink``.  Two implementations ship with the package:

- ``ConsoleSink`` writes to a Rich console (standard output by default).
- ``BufferSink`` keeps the lines in memory so callers and tests can
  inspect the transcript.

Usage
-----
::

    from ems.output import BufferSink

    sink = BufferSink()
    employee.describe(sink)
    sink.lines  # ['Displaying full-time employee details.']
"""
from __future__ import annotations

from typing import IO, Protocol, runtime_checkable

from rich.console import Console


@runtime_checkable
class OutputSink(Protocol):
    """Anything that accepts one line of output at a time."""

    def write_line(self, text: str) -> None:
        """Write ``text`` followed by a line break."""
        ...  # pragma: no cover


class ConsoleSink:
    """Write lines verbatim to a Rich console.

    Markup, emoji codes and syntax highlighting are disabled so a line
    such as ``"Processing command 1 ..."`` reaches the terminal exactly
    as written.

    Parameters
    ----------
    console:
        Console to write to.  Defaults to a console over ``file``.
    file:
        Stream for the default console.  ``None`` means the *current*
        ``sys.stdout`` at write time, which keeps output capturable.
    """

    def __init__(self, console: Console | None = None, file: IO[str] | None = None) -> None:
        self._console = console or Console(file=file, soft_wrap=True)

    @property
    def console(self) -> Console:
        return self._console

    def write_line(self, text: str) -> None:
        self._console.print(text, markup=False, emoji=False, highlight=False)


class BufferSink:
    """Collect lines in memory."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def text(self) -> str:
        """All collected lines joined with newlines, with a trailing newline."""
        return "".join(f"{line}\n" for line in self._lines)

    def write_line(self, text: str) -> None:
        self._lines.append(text)

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"BufferSink(lines={len(self._lines)})"


def resolve_sink(sink: OutputSink | None) -> OutputSink:
    """Return ``sink``, or a ``ConsoleSink`` over standard output when it is ``None``."""
    return sink if sink is not None else ConsoleSink()
