"""Rewrite Rust type names into the pseudo-Rhai names shown in signatures.

This mirrors how Rhai itself prints function definitions: sigils, result
wrappers and paths are removed while generics are kept, and the engine's
built-in types get their script-facing names.
"""

from __future__ import annotations

from dataclasses import dataclass

_RESULT_SUFFIXES = (
    ",Box<EvalAltResult>>",
    ",Box<rhai::EvalAltResult>>",
    ", Box<EvalAltResult>>",
    ", Box<rhai::EvalAltResult>>",
)


@dataclass(frozen=True)
class EngineTypeNames:
    """Concrete Rust type names of the engine's built-in types.

    Defaults match a standard Rhai build (64-bit INT and FLOAT).

    Names are substituted after the path has been cut to its last `::`
    segment and after `Dynamic` became `?`, so a name containing `::` or
    `Dynamic` never matches. The array, blob, map, instant and fn_ptr
    defaults keep Rhai's full Rust names and are inert; pass path-free
    spellings to use them, e.g. `EngineTypeNames(array="Vec<?>")`.
    """

    int: str = "i64"
    float: str = "f64"
    array: str = "alloc::vec::Vec<rhai::types::dynamic::Dynamic>"
    blob: str = "alloc::vec::Vec<u8>"
    map: str = (
        "alloc::collections::btree::map::BTreeMap<"
        "smartstring::SmartString<smartstring::config::LazyCompact>, "
        "rhai::types::dynamic::Dynamic>"
    )
    instant: str = "std::time::Instant"
    fn_ptr: str = "rhai::types::fn_ptr::FnPtr"


DEFAULT_TYPE_NAMES = EngineTypeNames()


def remove_result(ty: str) -> str:
    """Unwrap `Result<T, Box<EvalAltResult>>`, `EngineResult<T>` and `RhaiResultOf<T>`.

    Anything else, including a `Result<` with an unknown error type, is
    returned unchanged.
    """
    inner = None
    if ty.startswith("Result<"):
        rest = ty[len("Result<") :]
        for suffix in _RESULT_SUFFIXES:
            if rest.endswith(suffix):
                inner = rest[: -len(suffix)]
                break
    elif ty.startswith("EngineResult<"):
        inner = _strip_closing(ty[len("EngineResult<") :])
    else:
        for prefix in ("RhaiResultOf<", "rhai::RhaiResultOf<"):
            if ty.startswith(prefix):
                inner = _strip_closing(ty[len(prefix) :])
                break

    return ty if inner is None else inner.strip()


def _strip_closing(ty: str) -> str | None:
    return ty[:-1] if ty.endswith(">") else None


def def_type_name(ty: str, type_names: EngineTypeNames = DEFAULT_TYPE_NAMES) -> str:
    """Simplify a raw type name for display, e.g. `&mut rhai::INT` -> `int`."""
    if ty.startswith("&mut"):
        ty = ty[len("&mut") :]
    ty = remove_result(ty.strip())
    # Drop the path, keeping the last segment only.
    ty = ty.split("::")[-1]

    replacements = (
        ("Iterator<Item=", "Iterator<"),
        ("Dynamic", "?"),
        ("INT", "int"),
        (type_names.int, "int"),
        ("FLOAT", "float"),
        ("&str", "String"),
        ("ImmutableString", "String"),
        (type_names.float, "float"),
        (type_names.array, "Array"),
        (type_names.blob, "Blob"),
        (type_names.map, "Map"),
        (type_names.instant, "Instant"),
        (type_names.fn_ptr, "FnPtr"),
    )
    for old, new in replacements:
        if old:
            ty = ty.replace(old, new)

    return ty
