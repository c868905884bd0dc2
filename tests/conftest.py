"""Shared pytest configuration for rhai_autodocs tests."""

import json

import pytest

from tests.helpers import fn_json, indexed_doc


@pytest.fixture
def my_module_metadata() -> dict:
    """Global namespace with one static module `my_module` of two indexed functions."""
    return {
        "modules": {
            "my_module": {
                "doc": "/// My own module.",
                "functions": [
                    fn_json(
                        "add",
                        params=[("a", "i64"), ("b", "i64")],
                        return_type="i64",
                        doc=indexed_doc("A function that adds two integers together.", 2),
                    ),
                    fn_json(
                        "hello_world",
                        doc=indexed_doc("A function that prints to stdout.", 1),
                    ),
                ],
            }
        }
    }


@pytest.fixture
def metadata_file(tmp_path, my_module_metadata):
    path = tmp_path / "metadata.json"
    path.write_text(json.dumps(my_module_metadata))
    return path
