"""Unit tests for ems.employees: employee variants and their factories."""
from __future__ import annotations

import pytest

from ems.employees import (
    Employee,
    EmployeeFactory,
    FullTimeEmployee,
    FullTimeEmployeeFactory,
    PartTimeEmployee,
    PartTimeEmployeeFactory,
    create_employee,
    employee_factories,
    get_factory,
)
from ems.output import BufferSink
from ems.plugins import PluginNotFoundError

FULL_TIME_LINE = "Displaying full-time employee details."
PART_TIME_LINE = "Displaying part-time employee details."


# ===========================================================================
# Employee variants
# ===========================================================================


class TestEmployee:
    def test_cannot_instantiate_abstract(self) -> None:
        with pytest.raises(TypeError):
            Employee()  # type: ignore[abstract]

    def test_full_time_describe(self, sink: BufferSink) -> None:
        FullTimeEmployee().describe(sink)
        assert sink.lines == [FULL_TIME_LINE]

    def test_part_time_describe(self, sink: BufferSink) -> None:
        PartTimeEmployee().describe(sink)
        assert sink.lines == [PART_TIME_LINE]

    def test_kind_tags(self) -> None:
        assert FullTimeEmployee().kind == "full-time"
        assert PartTimeEmployee().kind == "part-time"

    def test_describe_is_independent_of_call_order(self, sink: BufferSink) -> None:
        full, part = FullTimeEmployee(), PartTimeEmployee()
        part.describe(sink)
        full.describe(sink)
        full.describe(sink)
        part.describe(sink)
        assert sink.lines == [PART_TIME_LINE, FULL_TIME_LINE, FULL_TIME_LINE, PART_TIME_LINE]

    def test_display_details_alias(self, sink: BufferSink) -> None:
        FullTimeEmployee().display_details(sink)
        assert sink.lines == [FULL_TIME_LINE]

    def test_describe_defaults_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        PartTimeEmployee().describe()
        assert capsys.readouterr().out == PART_TIME_LINE + "\n"

    def test_repr(self) -> None:
        assert repr(FullTimeEmployee()) == "FullTimeEmployee()"


# ===========================================================================
# Factories
# ===========================================================================


class TestFactories:
    def test_full_time_factory_creates_full_time(self) -> None:
        assert isinstance(FullTimeEmployeeFactory().create_employee(), FullTimeEmployee)

    def test_part_time_factory_creates_part_time(self) -> None:
        assert isinstance(PartTimeEmployeeFactory().create_employee(), PartTimeEmployee)

    def test_each_call_returns_a_new_instance(self) -> None:
        factory = FullTimeEmployeeFactory()
        assert factory.create_employee() is not factory.create_employee()

    def test_factories_share_the_interface(self) -> None:
        assert issubclass(FullTimeEmployeeFactory, EmployeeFactory)
        assert issubclass(PartTimeEmployeeFactory, EmployeeFactory)


class TestFactoryRegistry:
    def test_builtin_kinds_registered(self) -> None:
        assert employee_factories.list_plugins() == ["full-time", "part-time"]

    def test_get_factory(self) -> None:
        assert isinstance(get_factory("part-time"), PartTimeEmployeeFactory)

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [("full-time", FullTimeEmployee), ("part-time", PartTimeEmployee)],
    )
    def test_create_employee(self, kind: str, expected: type[Employee]) -> None:
        employee = create_employee(kind)
        assert isinstance(employee, expected)
        assert employee.kind == kind

    def test_unknown_kind_raises(self) -> None:
        with pytest.raises(PluginNotFoundError) as info:
            create_employee("contractor")
        assert "contractor" in str(info.value)
        assert info.value.available == ["full-time", "part-time"]
