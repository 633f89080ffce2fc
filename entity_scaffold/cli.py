"""Command-line entry point: ``entity-scaffold ENTITY_NAME``."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError
from rich.markup import escape

from .config import ScaffoldConfig
from .errors import ScaffoldError
from .scaffolder import ScaffoldGenerator
from .utils import (
    print_error,
    print_files_table,
    print_note,
    print_source,
    print_success,
    print_warning,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="entity-scaffold",
        description=(
            "Create an entity with associated models: read and write models, "
            "repository and finder interfaces with DBAL implementations, "
            "create/update commands and handlers, forms and a controller."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  entity-scaffold Product\n"
            "  entity-scaffold Invoice --dry-run --show-source\n"
            "  entity-scaffold Order -o ./app/src --root-namespace Shop --force\n"
        ),
    )
    parser.add_argument("entity_name", help="Entity name, e.g. Product")
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Source directory mapped to the root namespace (default: ./src)",
    )
    parser.add_argument(
        "--root-namespace",
        default=None,
        help="Application root namespace (default: App)",
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="JSON or YAML configuration file",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Only print the files that would be created",
    )
    parser.add_argument(
        "--force", "-f",
        action="store_true",
        help="Overwrite files that already exist",
    )
    parser.add_argument(
        "--show-source",
        action="store_true",
        help="Print the generated source of every file",
    )
    return parser


def load_config(args: argparse.Namespace) -> ScaffoldConfig:
    """Resolve configuration: CLI flags > config file > environment."""
    overrides: dict[str, Any] = {}
    if args.output:
        overrides["source_dir"] = Path(args.output)
    if args.root_namespace:
        overrides["root_namespace"] = args.root_namespace

    if args.config:
        file_values = ScaffoldConfig.load(Path(args.config)).model_dump(exclude_unset=True)
        overrides = {**file_values, **overrides}
    return ScaffoldConfig.from_env(**overrides)


def run(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, ValueError) as exc:
        # ValidationError is a ValueError subclass
        print_error(f"Error: invalid configuration: {escape(str(exc))}")
        return 1

    print_note(f"You passed an argument: {escape(args.entity_name)}")
    print_note(f"Source directory: {escape(str(config.source_dir))}")

    generator = ScaffoldGenerator(config)
    try:
        result = asyncio.run(
            generator.generate(args.entity_name, force=args.force, dry_run=args.dry_run)
        )
    except (ScaffoldError, ValidationError) as exc:
        print_error(f"Error: {escape(str(exc))}")
        return 1

    print_files_table(result.files)
    if args.show_source:
        for rendered in result.files:
            print_source(rendered)

    if result.dry_run:
        print_warning(f"Dry run: {len(result.files)} file(s) not written.")
    else:
        target = escape(str(config.source_dir))
        print_success(f"Created {len(result.written)} file(s) in {target}.")
    return 0


def main() -> None:
    """CLI entry point for ``python -m entity_scaffold``."""
    sys.exit(run())

