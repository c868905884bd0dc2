"""Sources of engine function metadata.

A live Rhai engine exports its registered functions and modules with
`Engine::gen_fn_metadata_to_json(include_standard_packages)`. Anything that
can answer that call can be documented.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .errors import MetadataError


class MetadataExporter(Protocol):
    def gen_fn_metadata_to_json(self, include_standard_packages: bool) -> str: ...


class JsonMetadataExporter:
    """Metadata already exported to JSON, e.g. dumped by a build script.

    A dump only holds what it was exported with, so it can only answer for
    the same `include_standard_packages` value.
    """

    def __init__(self, text: str, include_standard_packages: bool = False):
        self.text = text
        self.include_standard_packages = include_standard_packages

    @classmethod
    def from_path(
        cls, path: Path | str, include_standard_packages: bool = False
    ) -> JsonMetadataExporter:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise MetadataError(f"cannot read {path}: {e}") from e
        return cls(text, include_standard_packages)

    def gen_fn_metadata_to_json(self, include_standard_packages: bool) -> str:
        if include_standard_packages != self.include_standard_packages:
            raise MetadataError(
                "metadata was exported with "
                f"include_standard_packages={self.include_standard_packages}, "
                f"requested {include_standard_packages}"
            )
        return self.text
