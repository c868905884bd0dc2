"""Write generated module documentation to markdown files."""

from __future__ import annotations

from pathlib import Path

from .generators import NAMESPACE_SEPARATOR
from .models import ModuleDocumentation


def module_path(name: str, out_dir: Path) -> Path:
    """File for a module: `global::a::b` -> `<out_dir>/global/a/b.md`."""
    *parents, leaf = name.split(NAMESPACE_SEPARATOR)
    return out_dir.joinpath(*parents, f"{leaf}.md")


def write_documentation(root: ModuleDocumentation, out_dir: Path) -> list[Path]:
    """Write one file per module, parents first. Returns the written paths."""
    written = []
    for module in root.walk():
        path = module_path(module.name, out_dir)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(module.documentation, encoding="utf-8")
        written.append(path)
    return written
