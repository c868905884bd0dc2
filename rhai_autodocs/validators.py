"""Ordering-directive validation and documentation coverage."""

from __future__ import annotations

import re
from collections.abc import Iterable

from .comments import FUNCTION_INDEX_PATTERN, split_lines
from .models import FunctionGroup, FunctionMetadata, ValidationResult

_INDEX = re.compile(r"[0-9]+")


def directive_values(metadata: FunctionMetadata) -> list[str]:
    """Raw values of every `# rhai-autodocs:index:<n>` line of one overload."""
    return [
        line.rsplit(FUNCTION_INDEX_PATTERN, 1)[1].strip()
        for fragment in metadata.doc_comments or []
        for line in split_lines(fragment)
        if FUNCTION_INDEX_PATTERN in line
    ]


def find_index_directives(group: FunctionGroup) -> list[str]:
    """First raw index value of each overload carrying one."""
    found = []
    for metadata in group.polymorphisms:
        values = directive_values(metadata)
        if values:
            found.append(values[0])
    return found


def parse_index(raw: str) -> int | None:
    """Parse a directive value, None unless it is a plain positive (ASCII) integer."""
    if not _INDEX.fullmatch(raw):
        return None
    index = int(raw)
    return index if index > 0 else None


def validate_index_directives(groups: list[FunctionGroup]) -> ValidationResult:
    """Validate index directives for ordering `groups` by index.

    Checks:
    1. Every group has a directive on at least one overload (error)
    2. The index is a positive integer within 1..=len(groups) (error)
    3. No two groups claim the same index (error)
    4. Only one directive per group, on one overload (warning, the first wins)

    Args:
        groups: Function groups of a single module

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()
    claimed: dict[int, str] = {}

    for group in groups:
        directives = find_index_directives(group)
        if not directives:
            result.errors.append(f"missing ord metadata in function {group.key}")
            continue

        for metadata in group.polymorphisms:
            count = len(directive_values(metadata))
            if count > 1:
                result.warnings.append(
                    f"{group.key}: {count} index directives on one overload, using the first"
                )

        if len(directives) > 1:
            result.warnings.append(
                f"{group.key}: {len(directives)} overloads carry an index, using the first"
            )

        index = parse_index(directives[0])
        if index is None:
            result.errors.append(
                f"invalid index '{directives[0]}' in function {group.key}"
            )
            continue

        if index > len(groups):
            result.errors.append(
                f"index {index} out of range 1..={len(groups)} in function {group.key}"
            )
            continue

        if index in claimed:
            result.errors.append(
                f"index {index} claimed by both {claimed[index]} and {group.key}"
            )
            continue

        claimed[index] = group.key

    return result


def compute_coverage(groups: Iterable[FunctionGroup]) -> float:
    """Share of rendered (non-anonymous) function groups that carry a doc comment.

    Returns:
        Coverage in 0.0 - 1.0, 1.0 when nothing is rendered
    """
    rendered = [group for group in groups if not group.is_anonymous]
    documented = sum(1 for group in rendered if group.polymorphisms[0].doc_comments)

    return documented / len(rendered) if rendered else 1.0
