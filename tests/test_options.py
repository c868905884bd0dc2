"""Tests for the public entry point and metadata exporters."""

import json

import pytest

from rhai_autodocs import (
    EngineTypeNames,
    FunctionOrder,
    JsonMetadataExporter,
    MetadataError,
    PreProcessingError,
    options,
)
from tests.helpers import fn_json


class FailingEngine:
    def gen_fn_metadata_to_json(self, include_standard_packages: bool) -> str:
        raise RuntimeError("engine exploded")


class RecordingEngine:
    def __init__(self, text: str):
        self.text = text
        self.calls = []

    def gen_fn_metadata_to_json(self, include_standard_packages: bool) -> str:
        self.calls.append(include_standard_packages)
        return self.text


class TestOptions:
    """Tests for the Options builder."""

    def test_defaults(self):
        opts = options()
        assert opts.order is FunctionOrder.ALPHABETICAL
        assert opts.standard_packages is False

    def test_builder_returns_same_options(self):
        opts = options()
        assert opts.include_standard_packages(True) is opts
        assert opts.order_with(FunctionOrder.BY_INDEX) is opts
        assert opts.standard_packages is True
        assert opts.order is FunctionOrder.BY_INDEX

    def test_generate_by_index(self, my_module_metadata):
        engine = JsonMetadataExporter(json.dumps(my_module_metadata))
        docs = (
            options()
            .include_standard_packages(False)
            .order_with(FunctionOrder.BY_INDEX)
            .generate(engine)
        )
        assert docs.name == "global"
        assert docs.documentation == "# global\n\n"
        assert [m.name for m in docs.sub_modules] == ["global::my_module"]
        text = docs.sub_modules[0].documentation
        assert text.index("<code>fn</code> hello_world") < text.index("<code>fn</code> add")

    def test_custom_type_names(self):
        engine = RecordingEngine(
            json.dumps({"functions": [fn_json("add", params=[("a", "i32")], return_type="i32")]})
        )
        docs = options().type_names(EngineTypeNames(int="i32")).generate(engine)
        assert "fn add(a: int) -> int" in docs.documentation

    def test_flag_is_passed_to_engine(self):
        engine = RecordingEngine("{}")
        options().include_standard_packages(True).generate(engine)
        assert engine.calls == [True]

    def test_generate_fails_without_directives(self):
        engine = RecordingEngine(json.dumps({"functions": [fn_json("f")]}))
        with pytest.raises(PreProcessingError):
            options().order_with(FunctionOrder.BY_INDEX).generate(engine)


class TestMetadataErrors:
    """Export and decode failures surface as MetadataError."""

    def test_engine_failure(self):
        with pytest.raises(MetadataError, match="engine exploded"):
            options().generate(FailingEngine())

    def test_invalid_json(self):
        with pytest.raises(MetadataError):
            options().generate(RecordingEngine("{not json"))

    def test_invalid_root(self):
        with pytest.raises(MetadataError):
            options().generate(RecordingEngine('{"functions": 3}'))

    def test_exporter_flag_mismatch(self):
        engine = JsonMetadataExporter("{}", include_standard_packages=False)
        with pytest.raises(MetadataError, match="include_standard_packages=False"):
            options().include_standard_packages(True).generate(engine)

    def test_exporter_missing_file(self, tmp_path):
        with pytest.raises(MetadataError, match="cannot read"):
            JsonMetadataExporter.from_path(tmp_path / "missing.json")
