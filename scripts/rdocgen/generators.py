"""Ruby stub generation and output."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .models import FunctionDoc, RubyStub

HEADER = "# Auto-generated Ruby methods with RDoc"
MODULE_NAME = "RustBindings"

_COMMENT_PREFIX = "  # "
_STUB_BODY = [
    "    def {name}(*args)",
    "      # Rust implementation placeholder",
    "    end",
]


def _split_lines(rust_doc: str) -> list[str]:
    """Split on newlines, dropping trailing empty fields like Ruby's String#split."""
    lines = rust_doc.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def format_rdoc(rust_doc: str) -> str:
    """Convert rustdoc text into an RDoc comment block.

    Inner blank lines are kept as bare ``#`` lines; trailing newlines add
    nothing.
    """
    return "\n".join(_COMMENT_PREFIX + line.strip() for line in _split_lines(rust_doc))


def generate_ruby_stub(function: FunctionDoc) -> RubyStub:
    """Generate a documented no-op Ruby method for a Rust function."""
    if not isinstance(function.name, str):
        raise TypeError(
            f"function name must be str, got {type(function.name).__name__}"
        )
    lines = []
    comment = format_rdoc(function.docs)
    if comment:
        lines.append(comment)
    lines.extend(line.format(name=function.name) for line in _STUB_BODY)
    return RubyStub(name=function.name, text="\n".join(lines))


def generate_ruby_stubs(functions: Iterable[FunctionDoc]) -> list[RubyStub]:
    """Generate stubs in input order. Duplicate names are kept."""
    return [generate_ruby_stub(f) for f in functions]


def render_ruby_module(
    stubs: Iterable[RubyStub],
    module_name: str = MODULE_NAME,
    header: str = HEADER,
) -> str:
    """Render the complete Ruby file, stubs separated by blank lines."""
    lines = [header, f"module {module_name}"]
    body = "\n\n".join(stub.text for stub in stubs)
    if body:
        lines.append(body)
    lines.append("end")
    return "\n".join(lines) + "\n"


def write_ruby_file(
    output_file: str | Path,
    stubs: Iterable[RubyStub],
    module_name: str = MODULE_NAME,
) -> None:
    """Write stubs to ``output_file``, replacing whatever was there.

    The parent directory must already exist.
    """
    print("Writing to Ruby file...")
    content = render_ruby_module(stubs, module_name=module_name)
    with open(output_file, "w", encoding="utf-8", newline="\n") as f:
        f.write(content)
    print(f"Generated RDoc-compatible Ruby methods in {output_file}")
