"""
CLI integration for code generation functionality.

Provides the ``modelgen`` command-line interface.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from . import (
    generate_from_document,
    list_supported_languages,
    list_all_language_info,
    GeneratorConfig,
    load_config,
)
from .core.config import GENERATE_CODE, GENERATE_LOADER, ConfigError
from ..logging_config import configure_logging
from ..utils import load_schema
from .registry import get_registry


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich consoles; diagnostics go to stderr when stdout carries code
console = Console()
error_console = Console(stderr=True)


def create_parser() -> argparse.ArgumentParser:
    """Create the ``modelgen`` argument parser."""
    parser = argparse.ArgumentParser(
        prog="modelgen",
        description="Generate model classes from a normalized schema document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  modelgen schema.json
  modelgen schema.json --type Post --output Post.java
  modelgen --mode loader --stdin < schema.json
  modelgen --list-languages
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Schema document (JSON)")
    input_group.add_argument("--url", help="URL to fetch the schema document from")
    input_group.add_argument(
        "--stdin", action="store_true", help="Read the schema document from standard input"
    )

    parser.add_argument(
        "--language",
        "-l",
        default="java",
        help="Target language for code generation (default: java)",
    )
    parser.add_argument(
        "--mode",
        choices=[GENERATE_CODE, GENERATE_LOADER],
        help="Generate model code or the model provider (default: code)",
    )
    parser.add_argument(
        "--type",
        dest="selected_type",
        metavar="NAME",
        help="Only generate the named model or enum",
    )
    parser.add_argument("--package-name", "--package", help="Package name")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add comments to generated code",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation metadata and debug logging",
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``modelgen`` console script."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.list_languages:
            return _list_languages()

        if not (args.file or args.url or args.stdin):
            console.print("[red]✗[/red] Input source required (file, --url, or --stdin)")
            return 1

        if not _validate_language(args.language):
            return 1

        document = _get_input_data(args)
        config = _build_config(args)
        return _generate_and_output(document, args.language, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except Exception as e:
        console.print(f"[red]✗ Unexpected error:[/red] {e}")
        return 1


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")
    table.add_column("Default Package", style="magenta")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            f"🔧 {lang_name}",
            info["file_extension"],
            info["class"],
            aliases,
            info["package_name"],
        )

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Classes:[/bold] modelgen [dim]schema.json[/dim] --language [cyan]LANGUAGE[/cyan]\n"
            "[bold]Provider:[/bold] modelgen [dim]schema.json[/dim] --mode [cyan]loader[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _validate_language(language: str) -> bool:
    """Validate that a language is supported."""
    supported = list_supported_languages()
    if not get_registry().is_supported(language):
        console.print(f"[red]✗ Unsupported language '{language}'[/red]")
        console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _get_input_data(args: argparse.Namespace):
    """Get the schema document from file, URL or stdin."""
    try:
        if args.file:
            return load_schema(file_path=args.file)[1]
        if args.url:
            return load_schema(url=args.url)[1]
        return json.load(sys.stdin)
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON input: {e}") from e
    except Exception as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {}

    if args.package_name:
        overrides["package_name"] = args.package_name

    if args.mode:
        overrides["generate"] = args.mode

    if args.selected_type:
        overrides["selected_type"] = args.selected_type

    if args.no_comments:
        overrides["add_comments"] = False

    if args.output:
        overrides["output_file"] = args.output

    try:
        return load_config(
            get_registry().resolve_language(args.language),
            custom_config=overrides,
            config_file=args.config,
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(
    document, language: str, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    report_console = console if config.output_file or console.is_terminal else error_console

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=report_console,
        transient=True,
    ) as progress:
        gen_task = progress.add_task(f"[green]Generating {language} code...", total=None)
        result = generate_from_document(document, language, config)
        progress.remove_task(gen_task)

    if not result.success:
        report_console.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            report_console.print(f"[dim]Details: {result.exception!r}[/dim]")
        return 1

    if config.output_file:
        output_path = Path(config.output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated {language} code saved to [cyan]{output_path}[/cyan]"
        )
    elif console.is_terminal:
        top_border = "═" * 30
        console.print(
            f"[green]{top_border} 📄 Generated {language.title()} Code {top_border}[/green]\n"
        )
        console.print(Syntax(result.code, language, theme="monokai"))
        console.print(f"\n[green]{top_border * 3}[/green]")
    else:
        # Redirected stdout receives the bare source
        sys.stdout.write(result.code)
        sys.stdout.flush()

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        report_console.print()
        report_console.print(metadata_table)

    if result.warnings:
        report_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            report_console.print(f"  [yellow]•[/yellow] {warning}")
        report_console.print()

    return 0


if __name__ == "__main__":
    sys.exit(main())
