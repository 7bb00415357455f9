"""Rustdoc JSON loading and function extraction."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import SchemaError
from .models import ExtractionResult, FunctionDoc, IndexItem, ItemKind

log = logging.getLogger(__name__)


def load_rustdoc(path: str | Path) -> Any:
    """Read and parse a rustdoc JSON file.

    I/O and JSON decode errors are raised unchanged.
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def classify_item(item_id: str, item: Any) -> IndexItem:
    """Classify a single index entry.

    Anything whose ``inner`` is not a mapping holding a ``function`` key
    (including a missing ``inner``) is ``ItemKind.OTHER``.
    """
    if not isinstance(item, Mapping):
        raise SchemaError(
            f"index entry {item_id!r} is {type(item).__name__}, expected object",
            item_id=item_id,
        )

    inner = item.get("inner")
    if isinstance(inner, Mapping) and "function" in inner:
        kind = ItemKind.FUNCTION
    else:
        kind = ItemKind.OTHER

    return IndexItem(
        item_id=item_id,
        kind=kind,
        name=item.get("name"),
        docs=item.get("docs"),
    )


def _to_function_doc(item: IndexItem) -> FunctionDoc:
    """Project a documented function item, failing fast on bad field types."""
    if not isinstance(item.name, str):
        raise TypeError(
            f"function {item.item_id!r}: name must be str, "
            f"got {type(item.name).__name__}"
        )
    if not isinstance(item.docs, str):
        raise TypeError(
            f"function {item.name!r}: docs must be str, "
            f"got {type(item.docs).__name__}"
        )
    return FunctionDoc(name=item.name, docs=item.docs)


def extract_functions(document: Any) -> ExtractionResult:
    """Extract documented functions from a parsed rustdoc document.

    Args:
        document: Parsed rustdoc JSON. Only its ``index`` mapping is used.

    Returns:
        ExtractionResult with documented functions in index order, plus the
        names of every function item for coverage reporting.

    Raises:
        SchemaError: If ``index`` is missing, is not a mapping, or holds a
            non-object entry.
        TypeError: If a documented function has a non-string name or docs.
    """
    if not isinstance(document, Mapping) or "index" not in document:
        raise SchemaError("rustdoc document has no 'index'")
    index = document["index"]
    if not isinstance(index, Mapping):
        raise SchemaError(
            f"rustdoc 'index' is {type(index).__name__}, expected object"
        )

    functions: list[FunctionDoc] = []
    all_functions: list[str] = []

    for item_id, raw in index.items():
        item = classify_item(item_id, raw)

        if item.kind is not ItemKind.FUNCTION:
            log.debug("Skipping %s: not a function", item_id)
            continue

        all_functions.append(item.name if isinstance(item.name, str) else item_id)

        # null, missing and "" all mean undocumented
        if not item.docs:
            log.debug("Skipping %s: no docs", item.name or item_id)
            continue

        functions.append(_to_function_doc(item))

    return ExtractionResult(functions=functions, all_functions=all_functions)
