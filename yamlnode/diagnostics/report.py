"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from yamlnode.diagnostics.diagnostic import Diagnostic


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    """Merge diagnostic groups in source order.

    When several diagnostics start at the same offset only the first reported
    one is kept; later ones are cascades of the same problem.
    """
    merged: list[Diagnostic] = []
    for group in groups:
        merged.extend(group)
    merged.sort(key=lambda d: d.range.start)

    diagnostics: list[Diagnostic] = []
    seen_errors: set[int] = set()
    for diagnostic in merged:
        start = diagnostic.range.start.value
        if diagnostic.is_error:
            if start in seen_errors:
                continue
            seen_errors.add(start)
        diagnostics.append(diagnostic)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def first_error(diagnostics: Iterable[Diagnostic]) -> Diagnostic | None:
    return next((d for d in diagnostics if d.severity == "error"), None)
