"""Documentation generator for Rhai engines.

Reads function metadata exported by `Engine::gen_fn_metadata_to_json` and
generates:
    {out}/global.md          - Functions of the global namespace
    {out}/global/{module}.md - One page per (sub-)module
"""

from __future__ import annotations

import argparse
import logging
import shutil
import sys
from pathlib import Path

from .engine import JsonMetadataExporter
from .errors import AutodocsError
from .models import ModuleMetadata
from .options import options
from .ordering import FunctionOrder, iter_function_groups
from .validators import compute_coverage
from .writer import write_documentation


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rhai-autodocs",
        description="Generate markdown documentation from Rhai function metadata.",
    )
    parser.add_argument("metadata", type=Path, help="Path to the metadata JSON file.")
    parser.add_argument(
        "--out", type=Path, default=Path("docs"), help="Output directory (default: docs)."
    )
    parser.add_argument(
        "--order",
        choices=[order.value for order in FunctionOrder],
        default=FunctionOrder.ALPHABETICAL.value,
        help="Function order (default: alphabetical).",
    )
    parser.add_argument(
        "--include-standard-packages",
        action="store_true",
        help="The metadata was exported with standard packages included.",
    )
    parser.add_argument(
        "--clean", action="store_true", help="Remove the output directory first."
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Generate all documentation."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    print(f"Reading {args.metadata}...")

    try:
        engine = JsonMetadataExporter.from_path(
            args.metadata, args.include_standard_packages
        )
        docs = (
            options()
            .include_standard_packages(args.include_standard_packages)
            .order_with(FunctionOrder(args.order))
            .generate(engine)
        )
        groups = list(iter_function_groups(ModuleMetadata.from_json(engine.text)))
    except AutodocsError as e:
        print(f"  ✗ {e}", file=sys.stderr)
        return 1

    # Clean and recreate output directory
    if args.clean and args.out.exists():
        shutil.rmtree(args.out)
    args.out.mkdir(parents=True, exist_ok=True)

    print("\nGenerated:")
    for path in write_documentation(docs, args.out):
        print(f"  {path}")

    print(f"\nCoverage: {compute_coverage(groups):.0%}")
    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
