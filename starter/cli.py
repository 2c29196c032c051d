"""Command-line entry point.

Usage::

    python -m starter
    python -m starter --use-default --target ./demo
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from starter.config import BuildInfo, Settings
from starter.prompts import collect, confirm, show
from starter.scaffolder import DestinationResetError, ProjectGenerator
from starter.scaffolder.generator import summarize
from starter.utils import console, make_executable, print_summary_table, print_warning

EXECUTABLE_SCRIPTS: tuple[str, ...] = ("gradlew",)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``python -m starter``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="starter",
        description="Create a new project from the bundled templates",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m starter\n"
            "  python -m starter --use-default\n"
            "  python -m starter --target ./orders --template-dir ./my-templates\n"
        ),
    )
    parser.add_argument(
        "--use-default",
        action="store_true",
        help="Create a project with all default values",
    )
    parser.add_argument(
        "--target",
        default=None,
        help="Output directory (default: ~/.msa-starter)",
    )
    parser.add_argument(
        "--template-dir",
        default=None,
        help="Directory holding the webmvc/ and webflux/ template sets",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 if any file failed to generate",
    )

    args = parser.parse_args(argv)

    settings = Settings.from_env()
    if args.target:
        settings = settings.model_copy(update={"target_dir": Path(args.target).expanduser()})
    if args.template_dir:
        settings = settings.model_copy(update={"template_dir": Path(args.template_dir).expanduser()})

    try:
        info = BuildInfo.from_env()
    except ValueError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)

    if args.use_default:
        show(info)
    else:
        info = collect(info)
        if not confirm(info):
            print_warning("Aborted.")
            sys.exit(0)

    source_root = settings.template_root(info)
    if not source_root.is_dir():
        console.print(f"[bold red]Error:[/bold red] Template directory not found: {source_root}")
        sys.exit(1)

    generator = ProjectGenerator(info)
    try:
        results = asyncio.run(generator.run(source_root, settings.target_dir))
    except DestinationResetError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        sys.exit(1)

    for script in EXECUTABLE_SCRIPTS:
        script_path = settings.target_dir / script
        if script_path.is_file():
            make_executable(script_path)

    print_summary_table(summarize(results), title=f"Generated {settings.target_dir}")

    if args.strict and any(not r.success for r in results):
        sys.exit(2)


if __name__ == "__main__":
    main()
