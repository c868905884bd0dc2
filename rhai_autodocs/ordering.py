"""Grouping of polymorphic functions and the order they are documented in."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from enum import Enum

from .errors import PreProcessingError
from .models import FunctionGroup, FunctionMetadata, ModuleMetadata
from .validators import find_index_directives, parse_index, validate_index_directives

log = logging.getLogger(__name__)


class FunctionOrder(Enum):
    """Order in which function groups are documented.

    BY_INDEX reads a `# rhai-autodocs:index:<n>` line from the doc comment of
    each function; the line is removed from the generated markdown:

        /// Function that will appear first in docs.
        ///
        /// # rhai-autodocs:index:1
        #[rhai_fn(global)]
        pub fn my_function1() {}
    """

    ALPHABETICAL = "alphabetical"
    BY_INDEX = "by-index"


def group_functions(functions: list[FunctionMetadata]) -> list[FunctionGroup]:
    """Group overloads by raw name, keeping input order inside each group."""
    groups: dict[str, FunctionGroup] = {}
    for metadata in functions:
        if metadata.name not in groups:
            groups[metadata.name] = FunctionGroup(key=metadata.name)
        groups[metadata.name].polymorphisms.append(metadata)
    return list(groups.values())


def order_function_groups(
    groups: list[FunctionGroup], order: FunctionOrder = FunctionOrder.ALPHABETICAL
) -> list[FunctionGroup]:
    """Return `groups` in documentation order.

    Anonymous groups are kept: they still take an index slot under BY_INDEX.

    Raises:
        PreProcessingError: BY_INDEX and a group has a missing, malformed,
            out of range or duplicated index.
    """
    if order is FunctionOrder.ALPHABETICAL:
        return sorted(groups, key=lambda group: group.key)

    validation = validate_index_directives(groups)
    for warning in validation.warnings:
        log.warning(warning)
    if validation.errors:
        raise PreProcessingError(validation.errors[0])

    ordered: list[FunctionGroup | None] = [None] * len(groups)
    for group in groups:
        ordered[parse_index(find_index_directives(group)[0]) - 1] = group
    return ordered


def iter_function_groups(metadata: ModuleMetadata) -> Iterator[FunctionGroup]:
    """Yield the function groups of a module and all of its sub-modules."""
    yield from group_functions(metadata.functions or [])
    for value in (metadata.modules or {}).values():
        yield from iter_function_groups(ModuleMetadata.decode(value))
