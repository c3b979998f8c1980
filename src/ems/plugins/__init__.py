"""Variant registries for ems.

Third-party packages add variants through entry-points:

.. code-block:: toml

    [project.entry-points."ems.employee_factories"]
    contractor = "my_package.staff:ContractorFactory"
"""
from __future__ import annotations

from ems.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
)

__all__ = ["PluginRegistry", "PluginNotFoundError", "PluginAlreadyRegisteredError"]
