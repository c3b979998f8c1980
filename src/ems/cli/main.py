"""CLI entry point for ems.

Invoked as::

    ems [OPTIONS] [COMMAND] [ARGS]...

or, during development::

    python -m ems.cli.main

With no command, ``ems`` runs the built-in demonstration.

Commands
--------
demo        Run the built-in demonstration
run         Run a YAML scenario file
scenario    Print the built-in scenario as YAML
describe    Create an employee and describe it
fetch       Retrieve an employee through the external HR system adapter
show        Display an employee through a detail presenter
process     Send commands through the processor chain
variants    List registered employee kinds, presenter levels and processors
version     Show version information
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from ems.employees.employee import Employee
    from ems.output.sink import OutputSink

console = Console()
err_console = Console(stderr=True)


def _configure_logging(verbose: bool) -> None:
    """Send ``ems`` log records to stderr; DEBUG when ``verbose``."""
    handler = RichHandler(console=err_console, show_path=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root = logging.getLogger("ems")
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)
    sys.exit(1)


def _stdout_sink() -> "OutputSink":
    from ems.output import ConsoleSink

    return ConsoleSink()


def _employee_or_exit(kind: str) -> "Employee":
    from ems.employees import create_employee
    from ems.plugins import PluginNotFoundError

    try:
        return create_employee(kind)
    except PluginNotFoundError as exc:
        _fail(str(exc))


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group(invoke_without_command=True)
@click.version_option(package_name="ems-patterns")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Design patterns on a small employee-management domain."""
    _configure_logging(verbose)

    from ems import load_plugins

    load_plugins()
    if ctx.invoked_subcommand is None:
        ctx.invoke(demo_command)


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from ems import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]ems-patterns[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# demo / run / scenario commands
# ---------------------------------------------------------------------------


@cli.command(name="demo")
def demo_command() -> None:
    """Run the built-in demonstration."""
    from ems.scenario import run_demo

    run_demo(_stdout_sink())


@cli.command(name="run")
@click.argument("file", type=click.Path(exists=False))
def run_command(file: str) -> None:
    """Run a YAML scenario file.

    FILE is the path to the scenario to run.
    """
    from ems.scenario import ScenarioError, load_scenario_file, run_scenario

    try:
        scenario = load_scenario_file(file)
    except ScenarioError as exc:
        _fail(str(exc))
    run_scenario(scenario, _stdout_sink())


@cli.command(name="scenario")
def scenario_command() -> None:
    """Print the built-in scenario as YAML.

    The output is a valid input for ``ems run``.
    """
    from ems.scenario import DEFAULT_SCENARIO, dump_scenario

    click.echo(dump_scenario(DEFAULT_SCENARIO), nl=False)


# ---------------------------------------------------------------------------
# pattern commands
# ---------------------------------------------------------------------------


@cli.command(name="describe")
@click.argument("kind")
def describe_command(kind: str) -> None:
    """Create an employee of KIND through its factory and describe it."""
    _employee_or_exit(kind).describe(_stdout_sink())


@cli.command(name="fetch")
@click.argument("kind")
def fetch_command(kind: str) -> None:
    """Retrieve an employee of KIND through the external HR system adapter."""
    from ems.hr import ExternalHRSystemAdapter

    ExternalHRSystemAdapter(_employee_or_exit(kind)).retrieve_employee_data(_stdout_sink())


@cli.command(name="show")
@click.argument("kind")
@click.option("--level", "-l", default="basic", show_default=True, help="Presenter level")
def show_command(kind: str, level: str) -> None:
    """Display an employee of KIND through a detail presenter."""
    from ems.details import create_presenter
    from ems.plugins import PluginNotFoundError

    employee = _employee_or_exit(kind)
    try:
        presenter = create_presenter(level, employee)
    except PluginNotFoundError as exc:
        _fail(str(exc))
    presenter.display(_stdout_sink())


@cli.command(name="process")
@click.argument("commands", nargs=-1, required=True)
@click.option(
    "--chain",
    "chain_names",
    default=None,
    help="Comma-separated processor names, head first (default: handler-1,handler-2)",
)
def process_command(commands: tuple[str, ...], chain_names: str | None) -> None:
    """Send COMMANDS through the processor chain.

    Commands that no processor recognises produce no output.
    """
    from ems import build_chain
    from ems.plugins import PluginNotFoundError

    names = None
    if chain_names is not None:
        names = [n.strip() for n in chain_names.split(",") if n.strip()]
        if not names:
            _fail("--chain needs at least one processor name")
    try:
        chain = build_chain(names)
    except PluginNotFoundError as exc:
        _fail(str(exc))
    chain.process_all(commands, _stdout_sink())


# ---------------------------------------------------------------------------
# variants command
# ---------------------------------------------------------------------------


@cli.command(name="variants")
def variants_command() -> None:
    """List registered employee kinds, presenter levels and processors."""
    from ems.details import presenters
    from ems.employees import employee_factories
    from ems.processors import processors

    table = Table(title="Registered variants")
    table.add_column("Registry", style="bold")
    table.add_column("Name")
    table.add_column("Class")

    for registry in (employee_factories, presenters, processors):
        for name, cls in registry.items():
            table.add_row(registry.name, name, cls.__qualname__)

    console.print(table)


if __name__ == "__main__":
    cli()
