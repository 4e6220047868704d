import logging
from pathlib import Path
from typing import List, Optional

import typer
from a11y_linter import __version__
from a11y_linter.cache import FileCache, JsonCacheStore
from a11y_linter.engine import ScanEngine

from .config import ConfigError, load_config
from .discovery import find_files
from .report import print_console_report, write_report

app = typer.Typer(
    help="Detect and fix accessibility issues in HTML, JSX and TSX files",
    add_completion=False,
)

logger = logging.getLogger("a11y_cli")


def _version_callback(value: bool):
    if value:
        typer.echo(f"a11y-fix {__version__}")
        raise typer.Exit()


@app.command()
def main(
    patterns: List[str] = typer.Argument(..., help='File patterns to scan (e.g. "**/*.html" "src/**/*.tsx")'),
    fix: bool = typer.Option(False, "--fix", "-f", help="Automatically fix issues where possible"),
    report: bool = typer.Option(False, "--report", "-r", help="Write a report file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Report path (default: a11y-report.html)"),
    json_report: bool = typer.Option(False, "--json", help="Write the report as JSON"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to a TOML or JSON config file"),
    ignore: Optional[List[str]] = typer.Option(None, "--ignore", help="Glob pattern to skip (repeatable)"),
    no_cache: bool = typer.Option(False, "--no-cache", help="Do not read or write the result cache"),
    clear_cache: bool = typer.Option(False, "--clear-cache", help="Empty the result cache before scanning"),
    no_parallel: bool = typer.Option(False, "--no-parallel", help="Scan files one at a time"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Show version"),
):
    """Scan files for accessibility issues and optionally fix them"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        file_config = load_config(config_file)
    except ConfigError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)

    performance = {}
    if no_cache:
        performance["cache"] = False
    if no_parallel:
        performance["parallel"] = False
    config = file_config.merged(
        {
            "fix": fix or None,
            "report": report or None,
            "report_path": str(output) if output else None,
            "ignore": [*file_config.ignore, *(ignore or [])],
            "performance": performance or None,
        }
    )

    files = find_files(patterns, config.ignore)
    if not files:
        typer.echo(f"No files matched: {', '.join(patterns)}")
        return

    cache = None
    if config.performance.cache:
        cache = FileCache(JsonCacheStore(config.performance.cache_dir))
        if clear_cache:
            cache.clear()
        removed = cache.cleanup()
        logger.debug("Cache %s: %s (%d stale entries removed)", cache.store.location, cache.stats(), removed)

    typer.secho(f"Scanning {len(files)} file(s)...", dim=True)
    results = ScanEngine(config, cache=cache).scan_files(files)
    summary = print_console_report(results)

    if config.report:
        written = write_report(results, Path(config.report_path), as_json=json_report)
        typer.secho(f"\nReport written: {written}", fg=typer.colors.GREEN)

    if summary.errors and not config.fix:
        typer.secho("\nTip: use --fix to automatically fix issues where possible", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
