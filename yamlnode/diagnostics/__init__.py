"""Diagnostics."""

from yamlnode.diagnostics.codes import DiagnosticSpec, ErrorKind, Severity
from yamlnode.diagnostics.diagnostic import Diagnostic
from yamlnode.diagnostics.report import collect_diagnostics, first_error, has_errors

__all__ = [
    "Diagnostic",
    "DiagnosticSpec",
    "ErrorKind",
    "Severity",
    "collect_diagnostics",
    "first_error",
    "has_errors",
]
