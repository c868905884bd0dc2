"""Markdown generation for modules and their functions."""

from __future__ import annotations

import logging

from .comments import format_function_doc, format_module_doc
from .definitions import definition_kind, generate_function_definition
from .models import FunctionGroup, ModuleDocumentation, ModuleMetadata
from .ordering import FunctionOrder, group_functions, order_function_groups
from .typenames import DEFAULT_TYPE_NAMES, EngineTypeNames

log = logging.getLogger(__name__)

NAMESPACE_SEPARATOR = "::"

_FUNCTION_TEMPLATE = """
<div markdown="span" style='box-shadow: 0 4px 8px 0 rgba(0,0,0,0.2); padding: 15px; border-radius: 5px;'>

<h2 class="func-name"> <code>{kind}</code> {name} </h2>

```rust,ignore
{definitions}
```
{details}
</div>
</br>
"""

_DETAILS_TEMPLATE = """
<details>
<summary markdown="span"> details </summary>

{doc}
</details>
"""


def generate_function_documentation(
    group: FunctionGroup, type_names: EngineTypeNames = DEFAULT_TYPE_NAMES
) -> str | None:
    """Render one function group as a markdown block.

    Every overload contributes a definition line; only the first overload's
    doc comment is kept. Anonymous functions render nothing (None).
    """
    if group.is_anonymous:
        return None

    definitions = [
        generate_function_definition(metadata, type_names)
        for metadata in group.polymorphisms
    ]
    doc = format_function_doc(group.polymorphisms[0].doc_comments)

    return _FUNCTION_TEMPLATE.format(
        kind=definition_kind(definitions[0]),
        name=group.name,
        definitions="\n".join(definitions),
        details=_DETAILS_TEMPLATE.format(doc=doc) if doc is not None else "",
    )


def generate_module_documentation(
    namespace: str,
    metadata: ModuleMetadata,
    order: FunctionOrder = FunctionOrder.ALPHABETICAL,
    type_names: EngineTypeNames = DEFAULT_TYPE_NAMES,
) -> ModuleDocumentation:
    """Generate documentation for a module and, recursively, its sub-modules.

    Raises:
        PreProcessingError: function groups could not be ordered
        MetadataError: a sub-module could not be decoded
    """
    doc = format_module_doc(metadata.doc)
    md = ModuleDocumentation(
        name=namespace,
        documentation=f"# {namespace}\n\n" + (f"{doc}\n\n" if doc is not None else ""),
    )

    if metadata.functions:
        groups = order_function_groups(group_functions(metadata.functions), order)
        for group in groups:
            fn_doc = generate_function_documentation(group, type_names)
            if fn_doc is None:
                log.debug("%s: skipping anonymous function %s", namespace, group.key)
                continue
            md.documentation += fn_doc

    for sub_module, value in (metadata.modules or {}).items():
        md.sub_modules.append(
            generate_module_documentation(
                f"{namespace}{NAMESPACE_SEPARATOR}{sub_module}",
                ModuleMetadata.decode(value),
                order,
                type_names,
            )
        )

    log.debug("Generated %s (%d sub-modules)", namespace, len(md.sub_modules))
    return md
