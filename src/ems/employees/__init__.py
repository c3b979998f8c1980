"""Employee variants and the factories that create them."""
from __future__ import annotations

from ems.employees.employee import Employee, FullTimeEmployee, PartTimeEmployee
from ems.employees.factory import (
    EmployeeFactory,
    FullTimeEmployeeFactory,
    PartTimeEmployeeFactory,
    create_employee,
    employee_factories,
    get_factory,
)

__all__ = [
    "Employee",
    "FullTimeEmployee",
    "PartTimeEmployee",
    "EmployeeFactory",
    "FullTimeEmployeeFactory",
    "PartTimeEmployeeFactory",
    "employee_factories",
    "get_factory",
    "create_employee",
]
