"""Ruby RDoc stub generator for Rust bindings.

Reads the rustdoc JSON for the native extension and writes one documented
no-op Ruby method per documented Rust function, so RDoc can pick the Rust
doc comments up:

    cargo +nightly rustdoc -- -Z unstable-options --output-format json
    rdocgen --input target/doc/opendal_ruby.json --output lib/generated_doc.rb
"""

from __future__ import annotations

import argparse
import logging
import sys

from .config import Config
from .extractors import extract_functions, load_rustdoc
from .generators import generate_ruby_stubs, write_ruby_file
from .validators import compute_coverage, validate_stubs

log = logging.getLogger(__name__)


def run(config: Config) -> int:
    """Run the whole pipeline. Returns the process exit status."""
    print("Loading Rust documentation...")
    rust_docs = load_rustdoc(config.rust_doc_json)

    print("Extracting documented functions...")
    result = extract_functions(rust_docs)
    log.info(
        "%d/%d functions documented (%.0f%%)",
        len(result.functions),
        len(result.all_functions),
        compute_coverage(result) * 100,
    )

    validation = validate_stubs(result.functions, strict=config.strict)
    for warning in validation.warnings:
        log.warning(warning)
    if validation.errors:
        print("\nValidation errors:")
        for err in validation.errors:
            print(f"  ✗ {err}")
        return 1

    print("Generating Ruby method stubs...")
    stubs = generate_ruby_stubs(result.functions)

    write_ruby_file(config.output_doc_file, stubs, module_name=config.module_name)
    print("Done!")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the rdocgen argument parser."""
    parser = argparse.ArgumentParser(
        prog="rdocgen",
        description="Generate RDoc-annotated Ruby method stubs from rustdoc JSON.",
    )
    parser.add_argument(
        "--input", help="Path to rustdoc JSON (overrides RDOCGEN_RUST_DOC_JSON)."
    )
    parser.add_argument(
        "--output", help="Ruby file to write (overrides RDOCGEN_OUTPUT_DOC_FILE)."
    )
    parser.add_argument(
        "--module", help="Ruby module wrapping the stubs (default: RustBindings)."
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on duplicate or non-Ruby method names instead of warning.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log skipped index entries."
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Generate Ruby stubs from the command line."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = Config.from_env()
    if args.input:
        config.rust_doc_json = args.input
    if args.output:
        config.output_doc_file = args.output
    if args.module:
        config.module_name = args.module
    if args.strict is not None:
        config.strict = args.strict

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
