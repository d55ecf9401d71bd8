"""Snapshot-driven command line runner.

Checks a configuration snapshot written by the wizard front end and
scaffolds template sets from it.

Usage::

    python -m extwizard.cli check .extwizard/config.json
    python -m extwizard.cli scaffold auth --snapshot .extwizard/config.json --dry-run
    python -m extwizard.cli scaffold readme --var name="Tab Saver" --target ./out
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from rich.markup import escape
from rich.panel import Panel

from extwizard.config import WizardSettings
from extwizard.scaffolder import ScaffoldError, Scaffolder
from extwizard.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)
from extwizard.wizard import (
    ExtensionConfig,
    SnapshotError,
    ValidationResult,
    apply_defaults,
    load_snapshot,
    validate_config,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def parse_variables(pairs: Sequence[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` arguments into a mapping.

    Raises:
        ValueError: If an entry has no ``=`` or an empty key.
    """
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid variable {pair!r}: expected KEY=VALUE")
        variables[key] = value
    return variables


def _print_validation(result: ValidationResult) -> None:
    for message in result.errors:
        print_error(f"Error: {escape(message)}")
    for message in result.warnings:
        print_warning(f"Warning: {escape(message)}")


def _config_summary(config: ExtensionConfig) -> dict[str, str]:
    variables = config.template_variables()
    return {
        "Name": escape(variables["name"]) or "-",
        "UI type": variables["ui_type"] or "-",
        "Authentication": variables["auth_methods"] or "none",
        "AI providers": variables["ai_providers"] or "none",
        "Database": variables["database"] or "none",
        "Pricing model": variables["pricing_model"] or "none",
        "Hosting": variables["hosting_providers"] or "none",
        "Storage": variables["storage_type"],
        "Website": (
            f"yes ({variables['website_framework'] or 'framework unset'})"
            if config.include_website
            else "no"
        ),
    }


def _load_checked_config(path: Path, with_defaults: bool) -> ExtensionConfig | None:
    """Load, validate and optionally default a snapshot.

    Returns ``None`` (after printing the errors) when the configuration is
    invalid.
    """
    config = load_snapshot(path).config
    result = validate_config(config)
    _print_validation(result)
    if not result.is_valid:
        return None
    return apply_defaults(config) if with_defaults else config


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_check(args: argparse.Namespace, settings: WizardSettings) -> int:
    snapshot_path = Path(args.snapshot) if args.snapshot else settings.snapshot_file
    config = _load_checked_config(snapshot_path, args.apply_defaults)
    if config is None:
        print_error("Configuration is invalid. Fix the errors above before generating.")
        return 1

    print_summary_table(_config_summary(config), title=escape(f"Configuration: {snapshot_path}"))
    print_success("Configuration is valid.")
    return 0


def cmd_scaffold(args: argparse.Namespace, settings: WizardSettings) -> int:
    variables: dict[str, str] = {}
    if args.snapshot:
        config = _load_checked_config(Path(args.snapshot), with_defaults=True)
        if config is None:
            print_error("Configuration is invalid. Nothing was scaffolded.")
            return 1
        variables.update(config.template_variables())
    variables.update(parse_variables(args.var or []))

    scaffolder = Scaffolder(Path(args.templates) if args.templates else settings.templates_dir)
    result = scaffolder.scaffold(
        args.feature,
        variables,
        target_dir=Path(args.target) if args.target else settings.target_dir,
        dry_run=args.dry_run,
        report_file=Path(args.report) if args.report else settings.report_file,
        recursive=args.recursive,
    )

    if result.dry_run:
        console.print(
            Panel(escape(result.report.rstrip()), title="[DRY RUN]", border_style="yellow")
        )
        print_warning("No files were written.")
    else:
        print_success(
            f"Scaffolded {len(result.entries)} file(s) for '{escape(result.feature)}'. "
            f"Report appended to {result.report_file}"
        )
    return 0


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extwizard",
        description="extwizard -- validate wizard configurations and scaffold template sets",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  extwizard check .extwizard/config.json\n"
            "  extwizard scaffold auth --snapshot .extwizard/config.json --dry-run\n"
            "  extwizard scaffold readme --var name=demo --target ./out\n"
        ),
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Validate a configuration snapshot")
    check.add_argument(
        "snapshot",
        nargs="?",
        default=None,
        help="Snapshot JSON file (default: settings snapshot file)",
    )
    check.add_argument(
        "--apply-defaults",
        action="store_true",
        help="Show the configuration after smart defaults are applied",
    )

    scaffold = sub.add_parser("scaffold", help="Render a template set into the project")
    scaffold.add_argument("feature", help="Template set name (directory under the template root)")
    scaffold.add_argument("--snapshot", default=None, help="Take placeholder values from a snapshot")
    scaffold.add_argument(
        "--var",
        action="append",
        metavar="KEY=VALUE",
        help="Placeholder value; repeatable, overrides snapshot values",
    )
    scaffold.add_argument("--target", default=None, help="Target project directory")
    scaffold.add_argument("--report", default=None, help="Scaffold report file to append to")
    scaffold.add_argument("--templates", default=None, help="Template root directory")
    scaffold.add_argument(
        "--recursive",
        action="store_true",
        help="Include nested directories of the template set",
    )
    scaffold.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview changes without writing files",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for ``python -m extwizard.cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = WizardSettings.from_env()

    commands = {"check": cmd_check, "scaffold": cmd_scaffold}
    try:
        return commands[args.command](args, settings)
    except (SnapshotError, ScaffoldError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        return 1
    except OSError as exc:
        console.print(f"[bold red]Filesystem error:[/bold red] {escape(str(exc))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
