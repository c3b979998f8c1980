"""Command processors and the chain that connects them."""
from __future__ import annotations

from ems.processors.chain import DEFAULT_CHAIN, ProcessorChain, build_chain, link
from ems.processors.processor import (
    ConcreteEmployeeProcessor1,
    ConcreteEmployeeProcessor2,
    EmployeeProcessor,
    processors,
)

__all__ = [
    "EmployeeProcessor",
    "ConcreteEmployeeProcessor1",
    "ConcreteEmployeeProcessor2",
    "processors",
    "ProcessorChain",
    "DEFAULT_CHAIN",
    "build_chain",
    "link",
]
