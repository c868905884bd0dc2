"""Doc comment cleanup.

Rhai exports doc comments verbatim, delimiters included:

    /// Adds two integers.
    ///
    /// ```
    /// # let x = setup();
    /// add(x, 2)
    /// ```

Formatting strips the `///`, `/**` and `**/` delimiters, drops the
`# rhai-autodocs:index:<n>` ordering directive, and removes doc-test hidden
lines (`# ...`) from fenced code blocks, which mdbook hides but most markdown
renderers do not. Only a bare ``` line opens or closes a block; a tagged fence
such as ```rhai does not.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

FUNCTION_INDEX_PATTERN = "# rhai-autodocs:index:"

CODE_FENCE = "```"

_LINE_DELIMITER = re.compile(r"^\s*/// ?")
_BLOCK_DELIMITERS = ("/**", "**/")


def split_lines(text: str) -> list[str]:
    """Split on line feeds only (CRLF allowed); a final line feed ends the last line."""
    if not text:
        return []
    if text.endswith("\n"):
        text = text[:-1]
    return [line.removesuffix("\r") for line in text.split("\n")]


def strip_delimiters(text: str) -> str:
    """Remove comment delimiters from every line of `text`."""
    lines = []
    for line in text.split("\n"):
        line = _LINE_DELIMITER.sub("", line, count=1)
        for delimiter in _BLOCK_DELIMITERS:
            line = line.replace(delimiter, "")
        lines.append(line)
    return "\n".join(lines)


def remove_index_directives(fragments: Iterable[str]) -> str:
    """Drop ordering directive lines and join the remaining fragments."""
    return "\n".join(
        "\n".join(
            line for line in split_lines(fragment) if FUNCTION_INDEX_PATTERN not in line
        )
        for fragment in fragments
    )


def remove_test_code(text: str) -> str:
    """Drop hidden doc-test lines (`# ...`) inside fenced code blocks.

    `#{` opens an object map literal and is kept.
    """
    formatted = []
    in_code_block = False
    for line in split_lines(text):
        if line.strip() == CODE_FENCE:
            in_code_block = not in_code_block
            formatted.append(line)
            continue

        if in_code_block and line.startswith("#") and not line.startswith("#{"):
            continue
        formatted.append(line)

    return "\n".join(formatted)


def format_module_doc(doc: str | None) -> str | None:
    """Format a module doc comment, or None when the module has none."""
    if not doc:
        return None
    return remove_test_code(strip_delimiters(doc))


def format_function_doc(doc_comments: list[str] | None) -> str | None:
    """Format a function's doc comment fragments, or None when it has none."""
    if not doc_comments:
        return None
    return remove_test_code(strip_delimiters(remove_index_directives(doc_comments)))
