"""Stub validation and coverage checks."""

from __future__ import annotations

import re
from collections import Counter

from .models import ExtractionResult, FunctionDoc, ValidationResult

# def-able Ruby method names, including predicate/bang/setter suffixes
_RUBY_METHOD_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*[?!=]?")


def validate_stubs(
    functions: list[FunctionDoc],
    strict: bool = False,
) -> ValidationResult:
    """Check functions for names that would produce a broken Ruby file.

    Checks:
    1. Names defined more than once (later definitions shadow earlier ones)
    2. Names that are not valid Ruby method identifiers

    Neither check changes what gets generated.

    Args:
        functions: Documented functions, in output order
        strict: If True, problems are errors instead of warnings

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()
    problems = result.errors if strict else result.warnings

    counts = Counter(f.name for f in functions)
    for name, count in counts.items():
        if count > 1:
            problems.append(f"{name}: defined {count} times")

    for name in counts:
        if not _RUBY_METHOD_NAME.fullmatch(name):
            problems.append(f"{name}: not a valid Ruby method name")

    return result


def compute_coverage(result: ExtractionResult) -> float:
    """Fraction of function items that carry docs (1.0 if there are none)."""
    total = len(result.all_functions)
    if total == 0:
        return 1.0
    return len(result.functions) / total
