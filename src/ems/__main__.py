from __future__ import annotations

from ems.cli.main import cli

cli()
