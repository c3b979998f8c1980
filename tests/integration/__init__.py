"""Integration tests.

These exercise the whole package at once, including the installed
``ems`` entry point in a subprocess. Run only the fast suite with
``pytest tests/unit/``.
"""
from __future__ import annotations
