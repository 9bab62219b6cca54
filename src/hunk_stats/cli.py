"""
Command-line interface for Hunk Stats.

This module provides the CLI using Click framework for argument parsing
and wires the diff parser, the statistics engine, and the formatters.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from hunk_stats import __version__
from hunk_stats.config import Config, find_config_file, load_config

console = Console()
logger = logging.getLogger(__name__)

FORMAT_CHOICES = ["text", "json", "yaml", "markdown"]


def configure_logging(level: str) -> None:
    """Attach a rich handler to the package logger at the given level."""
    package_logger = logging.getLogger("hunk_stats")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _read_input(source: Path) -> str:
    """Read a diff or hunk body from a path, or from stdin for ``-``."""
    if str(source) == "-":
        return click.get_text_stream("stdin").read()
    return source.read_text(encoding="utf-8")


def _emit(formatted_output: str, output: Optional[Path]) -> None:
    if output:
        output.write_text(formatted_output, encoding="utf-8")
        console.print(f"[green]Results written to:[/green] {output}")
    else:
        # Print directly to stdout to preserve ANSI codes from formatter
        sys.stdout.write(formatted_output)
        sys.stdout.flush()


def _formatter_options(config: Config, output_format: str, no_intervals: bool) -> dict[str, Any]:
    options: dict[str, Any] = {
        "show_intervals": config.output.show_intervals and not no_intervals,
    }
    if output_format == "text":
        options["colorize"] = config.output.colorize
    return options


@click.group()
@click.version_option(version=__version__, prog_name="hunk-stats")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file.",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path]) -> None:
    """Hunk Stats - Count added, deleted and changed lines in unified diffs."""
    ctx.ensure_object(dict)
    if config is None:
        config = find_config_file(Path.cwd())
    ctx.obj["config"] = load_config(config) if config else Config()
    configure_logging(ctx.obj["config"].logging.level)


@cli.command()
@click.argument(
    "diff",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default=None,
    help="Output format (default: from config, else text).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file path. If not specified, prints to stdout.",
)
@click.option(
    "--no-intervals",
    is_flag=True,
    help="Do not show added/deleted line intervals.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.pass_context
def stat(
    ctx: click.Context,
    diff: Path,
    output_format: Optional[str],
    output: Optional[Path],
    no_intervals: bool,
    verbose: bool,
) -> None:
    """Show per-file line statistics of a unified diff (use - for stdin)."""
    from hunk_stats.models.report import FileStatEntry, StatReport
    from hunk_stats.output.formatters import get_formatter
    from hunk_stats.parser.diff_parser import DiffParser
    
    config: Config = ctx.obj["config"]
    output_format = output_format or config.output.format
    if verbose:
        configure_logging("DEBUG")
    
    try:
        diff_source = "stdin" if str(diff) == "-" else str(diff)
        if diff_source == "stdin":
            diff_files = DiffParser.parse_string(_read_input(diff))
        else:
            diff_files = DiffParser.parse_file(diff, encoding=config.parser.encoding)
        
        kept = DiffParser.filter_files(
            diff_files,
            config.parser.include_patterns,
            config.parser.exclude_patterns,
        )
        logger.debug("Reporting %d of %d files", len(kept), len(diff_files))
        
        entries = []
        warnings = [] if diff_files else ["No file diffs found in input"]
        for diff_file in kept:
            file_stat = diff_file.stat()
            path = diff_file.path.as_posix()
            if file_stat.is_empty:
                warnings.append(f"{path}: no line changes (binary or mode-only change)")
            entries.append(
                FileStatEntry(
                    path=path,
                    change_type=diff_file.change_type,
                    source_path=diff_file.source_path.as_posix() if diff_file.source_path else None,
                    hunk_count=len(diff_file.hunks),
                    stat=file_stat,
                )
            )
        
        report = StatReport(diff_source=diff_source, files=entries, warnings=warnings)
        
        formatter = get_formatter(
            output_format,
            **_formatter_options(config, output_format, no_intervals),
        )
        _emit(formatter.format(report), output)
    
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        raise click.Abort()


@cli.command()
@click.argument(
    "body",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--orig-start",
    type=int,
    default=1,
    show_default=True,
    help="First line number of the hunk in the old file.",
)
@click.option(
    "--new-start",
    type=int,
    default=1,
    show_default=True,
    help="First line number of the hunk in the new file.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(FORMAT_CHOICES),
    default=None,
    help="Output format (default: from config, else text).",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    help="Output file path. If not specified, prints to stdout.",
)
@click.option(
    "--no-intervals",
    is_flag=True,
    help="Do not show added/deleted line intervals.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
@click.pass_context
def hunk(
    ctx: click.Context,
    body: Path,
    orig_start: int,
    new_start: int,
    output_format: Optional[str],
    output: Optional[Path],
    no_intervals: bool,
    verbose: bool,
) -> None:
    """Show line statistics of a single raw hunk body (use - for stdin)."""
    from hunk_stats.models.diff import Hunk
    from hunk_stats.output.formatters import get_formatter
    
    config: Config = ctx.obj["config"]
    output_format = output_format or config.output.format
    if verbose:
        configure_logging("DEBUG")
    
    try:
        parsed = Hunk(
            orig_start_line=orig_start,
            new_start_line=new_start,
            body=_read_input(body),
        )
        formatter = get_formatter(
            output_format,
            **_formatter_options(config, output_format, no_intervals),
        )
        _emit(formatter.format_stat(parsed.stat()), output)
    
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        if verbose:
            import traceback
            console.print(traceback.format_exc())
        raise click.Abort()


def main() -> None:
    """Main entry point for the CLI."""
    cli(obj={})
