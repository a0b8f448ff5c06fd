"""Converter package orchestrating markdown assembly and PDF rendering."""

from .data_classes import (AssembledDocument, AssemblyRequest,
                           ConversionResult)
from .orchestrator import AssemblyOrchestrator, run, write_output

__all__ = [
    "AssembledDocument",
    "AssemblyOrchestrator",
    "AssemblyRequest",
    "ConversionResult",
    "run",
    "write_output",
]
