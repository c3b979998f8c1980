"""Scenario error types."""
from __future__ import annotations


class ScenarioError(ValueError):
    """A scenario could not be loaded or refers to something that does not exist.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    location:
        Where in the scenario the problem was found, e.g. ``"steps[3]"``.
    source:
        File path the scenario was read from, if any.
    """

    def __init__(self, message: str, location: str | None = None, source: str | None = None) -> None:
        self.message = message
        self.location = location
        self.source = source
        super().__init__(str(self))

    def __str__(self) -> str:
        where = ":".join(part for part in (self.source, self.location) if part)
        return f"{where}: {self.message}" if where else self.message
