"""Generate RDoc-annotated Ruby stubs from rustdoc JSON."""

from .config import Config
from .errors import RdocgenError, SchemaError
from .extractors import classify_item, extract_functions, load_rustdoc
from .generators import (
    format_rdoc,
    generate_ruby_stub,
    generate_ruby_stubs,
    render_ruby_module,
    write_ruby_file,
)
from .models import (
    ExtractionResult,
    FunctionDoc,
    IndexItem,
    ItemKind,
    RubyStub,
    ValidationResult,
)
from .validators import compute_coverage, validate_stubs

__all__ = [
    "Config",
    "RdocgenError",
    "SchemaError",
    "classify_item",
    "extract_functions",
    "load_rustdoc",
    "format_rdoc",
    "generate_ruby_stub",
    "generate_ruby_stubs",
    "render_ruby_module",
    "write_ruby_file",
    "ExtractionResult",
    "FunctionDoc",
    "IndexItem",
    "ItemKind",
    "RubyStub",
    "ValidationResult",
    "compute_coverage",
    "validate_stubs",
]
