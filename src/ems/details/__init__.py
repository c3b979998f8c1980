"""Employee detail presenters."""
from __future__ import annotations

from ems.details.presenter import (
    AdvancedEmployeeDetails,
    BasicEmployeeDetails,
    EmployeeDetails,
    create_presenter,
    presenters,
)

__all__ = [
    "EmployeeDetails",
    "BasicEmployeeDetails",
    "AdvancedEmployeeDetails",
    "presenters",
    "create_presenter",
]
