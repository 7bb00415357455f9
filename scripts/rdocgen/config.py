"""Runtime configuration for rdocgen."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .generators import MODULE_NAME

RUST_DOC_JSON = "target/doc/opendal_ruby.json"
OUTPUT_DOC_FILE = "lib/generated_doc.rb"  # Where the documentation will be written

_TRUTHY = frozenset({"1", "true", "yes", "on"})


@dataclass
class Config:
    """Input/output locations and generation options."""

    rust_doc_json: str = RUST_DOC_JSON
    output_doc_file: str = OUTPUT_DOC_FILE
    module_name: str = MODULE_NAME
    strict: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a Config, letting RDOCGEN_* variables override the defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            rust_doc_json=env.get("RDOCGEN_RUST_DOC_JSON", defaults.rust_doc_json),
            output_doc_file=env.get(
                "RDOCGEN_OUTPUT_DOC_FILE", defaults.output_doc_file
            ),
            module_name=env.get("RDOCGEN_MODULE_NAME", defaults.module_name),
            strict=env.get("RDOCGEN_STRICT", "").strip().lower() in _TRUTHY,
        )
