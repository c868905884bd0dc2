"""Builders for exported engine metadata, shaped like `gen_fn_metadata_to_json` output."""

from rhai_autodocs.models import FunctionMetadata


def fn_json(
    name: str,
    params: list[tuple[str, str]] | None = None,
    return_type: str | None = None,
    doc: str | list[str] | None = None,
    num_params: int | None = None,
) -> dict:
    """Raw JSON value of one function."""
    value = {
        "baseHash": 1,
        "fullHash": 2,
        "name": name,
        "namespace": "global",
        "access": "public",
        "numParams": len(params or []) if num_params is None else num_params,
        "type": "native",
    }
    if params is not None:
        value["params"] = [{"name": n, "type": t} for n, t in params]
    if return_type is not None:
        value["returnType"] = return_type
    if doc is not None:
        value["docComments"] = [doc] if isinstance(doc, str) else doc
    return value


def make_fn(name: str, **kwargs) -> FunctionMetadata:
    return FunctionMetadata.model_validate(fn_json(name, **kwargs))


def indexed_doc(text: str, index: int) -> str:
    """A doc comment carrying an ordering directive, as Rhai exports it."""
    return f"/// {text}\n///\n/// # rhai-autodocs:index:{index}"
