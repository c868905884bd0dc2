"""Pseudo-Rust definitions of Rhai functions, e.g. `fn add(a: int, b: int) -> int`."""

from __future__ import annotations

from .models import FunctionMetadata
from .typenames import DEFAULT_TYPE_NAMES, EngineTypeNames, def_type_name

OPERATORS = frozenset({"==", "!=", ">", ">=", "<", "<=", "in"})


def is_operator(name: str) -> bool:
    return name in OPERATORS


def _format_param(param: dict[str, str] | None, type_names: EngineTypeNames) -> str:
    if param is None:
        return "_: ?"
    name = param.get("name", "_")
    ty = param.get("type")
    return f"{name}: {def_type_name(ty, type_names) if ty is not None else '?'}"


def generate_function_definition(
    metadata: FunctionMetadata,
    type_names: EngineTypeNames = DEFAULT_TYPE_NAMES,
) -> str:
    """Render one overload as a single signature line.

    Missing parameter entries are rendered as `_: ?` rather than failing.
    """
    definition = "op " if is_operator(metadata.name) else "fn "

    if metadata.name.startswith("get$"):
        definition += f"get {metadata.name[len('get$'):]}("
    elif metadata.name.startswith("set$"):
        definition += f"set {metadata.name[len('set$'):]}("
    else:
        definition += f"{metadata.name}("

    params = metadata.params or []
    definition += ", ".join(
        _format_param(params[i] if i < len(params) else None, type_names)
        for i in range(metadata.num_params)
    )

    if metadata.return_type is not None:
        return f"{definition}) -> {def_type_name(metadata.return_type, type_names)}"
    return f"{definition})"


def definition_kind(definition: str) -> str:
    """Heading tag for a rendered definition: `op`, `get`, `set` or `fn`."""
    if definition.startswith("op"):
        return "op"
    if definition.startswith("fn get "):
        return "get"
    if definition.startswith("fn set "):
        return "set"
    return "fn"
