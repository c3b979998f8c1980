"""External HR system adapter."""
from __future__ import annotations

from ems.hr.adapter import HR_PREAMBLE, ExternalHRSystem, ExternalHRSystemAdapter

__all__ = ["ExternalHRSystem", "ExternalHRSystemAdapter", "HR_PREAMBLE"]
