"""Data models for engine metadata and generated documentation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from .errors import MetadataError


class _Metadata(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FunctionMetadata(_Metadata):
    """One registered function, as exported by the engine."""

    name: str  # may carry get$ / set$ / anon$ prefixes
    namespace: str  # "global" | "internal"
    access: str  # "public" | "private"
    base_hash: int
    full_hash: int
    num_params: int
    params: list[dict[str, str]] | None = None  # [{"name": ..., "type": ...}]
    signature: str | None = None
    return_type: str | None = None
    doc_comments: list[str] | None = None


class ModuleMetadata(_Metadata):
    """A module: its doc, its functions and its raw (undecoded) sub-modules."""

    doc: str | None = None
    functions: list[FunctionMetadata] | None = None
    modules: dict[str, Any] | None = None

    @classmethod
    def decode(cls, value: Any) -> ModuleMetadata:
        """Decode a raw JSON value (already parsed) into module metadata."""
        try:
            return cls.model_validate(value)
        except ValidationError as e:
            raise MetadataError(str(e)) from e

    @classmethod
    def from_json(cls, text: str) -> ModuleMetadata:
        """Decode a JSON document into module metadata."""
        try:
            return cls.decode(json.loads(text))
        except json.JSONDecodeError as e:
            raise MetadataError(str(e)) from e


@dataclass
class FunctionGroup:
    """Overloads of one callable, sharing the same raw name."""

    key: str  # raw name, e.g. "get$len"
    polymorphisms: list[FunctionMetadata] = field(default_factory=list)

    @property
    def name(self) -> str:
        """Display name, with accessor prefixes removed."""
        return self.key.replace("get$", "").replace("set$", "")

    @property
    def is_anonymous(self) -> bool:
        return self.name.startswith("anon$")


@dataclass
class ModuleDocumentation:
    """Generated markdown for one module, and its sub-modules."""

    name: str  # "global::my_module"
    documentation: str
    sub_modules: list[ModuleDocumentation] = field(default_factory=list)

    def walk(self):
        """Yield this module and all descendants, parents first."""
        yield self
        for sub_module in self.sub_modules:
            yield from sub_module.walk()


@dataclass
class ValidationResult:
    """Results from ordering-directive validation."""

    errors: list[str] = field(default_factory=list)  # Build fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Logged but allowed
