"""Data models for rustdoc extraction and stub generation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ItemKind(Enum):
    """Kind of a rustdoc index entry, as far as stub generation cares."""

    FUNCTION = "function"
    OTHER = "other"


@dataclass
class IndexItem:
    """A classified rustdoc index entry (raw JSON values, not yet checked)."""

    item_id: str
    kind: ItemKind
    name: Any = None
    docs: Any = None


@dataclass
class FunctionDoc:
    """A documented function pulled out of the index."""

    name: str
    docs: str  # Raw rustdoc text, may span several lines


@dataclass
class ExtractionResult:
    """Results from extracting documented functions."""

    functions: list[FunctionDoc]  # Documented, in index order
    all_functions: list[str] = field(default_factory=list)  # Every function item


@dataclass
class RubyStub:
    """Generated Ruby method stub."""

    name: str
    text: str  # Comment block plus def/end, no trailing newline


@dataclass
class ValidationResult:
    """Results from stub validation."""

    errors: list[str] = field(default_factory=list)  # Run fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Logged but allowed
