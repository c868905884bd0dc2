"""Tests for type name normalization."""

import pytest

from rhai_autodocs.typenames import EngineTypeNames, def_type_name, remove_result


@pytest.mark.parametrize(
    "ty",
    [
        "Result<Cache, Box<EvalAltResult>>",
        "Result<Cache,Box<EvalAltResult>>",
        "Result<Cache, Box<rhai::EvalAltResult>>",
        "Result<Cache,Box<rhai::EvalAltResult>>",
    ],
)
def test_remove_result(ty):
    assert remove_result(ty) == "Cache"


def test_remove_result_keeps_mut_reference():
    assert remove_result("Result<&mut Cache, Box<EvalAltResult>>") == "&mut Cache"


def test_remove_result_wrappers():
    assert remove_result("EngineResult<Stuff>") == "Stuff"
    assert remove_result("RhaiResultOf<Stuff>") == "Stuff"
    assert remove_result("rhai::RhaiResultOf<Stuff>") == "Stuff"


def test_remove_result_unknown_error_type_untouched():
    assert remove_result("Result<Cache, String>") == "Result<Cache, String>"


def test_def_type_name_strips_mut_and_path():
    assert def_type_name("&mut rhai::types::Cache") == "Cache"
    assert def_type_name("&mut  Cache ") == "Cache"


def test_def_type_name_result_then_path():
    assert def_type_name("Result<my::Cache, Box<rhai::EvalAltResult>>") == "Cache"
    assert def_type_name("Result<&mut Cache, Box<EvalAltResult>>") == "&mut Cache"


def test_def_type_name_builtins():
    assert def_type_name("i64") == "int"
    assert def_type_name("rhai::INT") == "int"
    assert def_type_name("f64") == "float"
    assert def_type_name("rhai::FLOAT") == "float"
    assert def_type_name("&str") == "String"
    assert def_type_name("rhai::ImmutableString") == "String"
    assert def_type_name("rhai::Dynamic") == "?"
    assert def_type_name("std::time::Instant") == "Instant"
    assert def_type_name("rhai::types::fn_ptr::FnPtr") == "FnPtr"


def test_def_type_name_generics_kept():
    assert def_type_name("Iterator<Item=Dynamic>") == "Iterator<?>"
    assert def_type_name("Option<Vec<u8>>") == "Option<Vec<u8>>"


def test_def_type_name_custom_engine_types():
    type_names = EngineTypeNames(int="i32", float="f32")
    assert def_type_name("i32", type_names) == "int"
    assert def_type_name("f32", type_names) == "float"
    assert def_type_name("i64", type_names) == "i64"


def test_path_free_engine_type_names():
    assert def_type_name("Vec<Dynamic>", EngineTypeNames(array="Vec<?>")) == "Array"
    # Default names carry paths, which are cut before substitution.
    assert def_type_name("alloc::vec::Vec<rhai::types::dynamic::Dynamic>") == "?>"
