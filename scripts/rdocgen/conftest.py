"""Shared pytest fixtures for rdocgen tests."""

import json

import pytest


@pytest.fixture
def rustdoc():
    """A small rustdoc document mixing functions, structs and undocumented items."""
    return {
        "root": "0",
        "crate_version": "0.1.0",
        "index": {
            "1": {
                "name": "open",
                "inner": {"function": {}},
                "docs": "Opens a file.\nReturns a handle.",
            },
            "2": {"name": "Operator", "inner": {"struct": {}}, "docs": "An operator."},
            "3": {"name": "close", "inner": {"function": {}}, "docs": None},
            "4": {"name": "stat", "inner": {"function": {"sig": {}}}, "docs": ""},
            "5": {"name": "read", "inner": {"function": {}}, "docs": "Reads data."},
            "6": {"name": "mod_doc", "docs": "No inner at all."},
            "7": {
                "name": "write",
                "inner": {"function": {}},
                "docs": "Writes data.\n\n  Overwrites existing content.  ",
            },
        },
    }


@pytest.fixture
def rustdoc_file(tmp_path, rustdoc):
    """The sample document written to target/doc/opendal_ruby.json."""
    path = tmp_path / "target" / "doc" / "opendal_ruby.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(rustdoc))
    return path
