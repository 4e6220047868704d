"""Console, JSON and HTML renderings of scan results."""

import json
from dataclasses import dataclass
from html import escape
from pathlib import Path
from typing import List, Sequence

import typer
from a11y_linter.models import ScanResult, Severity

_SEVERITY_COLORS = {
    Severity.ERROR: typer.colors.RED,
    Severity.WARNING: typer.colors.YELLOW,
    Severity.INFO: typer.colors.BLUE,
}


@dataclass
class Summary:
    files: int = 0
    issues: int = 0
    errors: int = 0
    warnings: int = 0
    info: int = 0
    fixed: int = 0

    @classmethod
    def of(cls, results: Sequence[ScanResult]) -> "Summary":
        summary = cls(files=len(results))
        for result in results:
            summary.issues += len(result.issues)
            summary.errors += result.count(Severity.ERROR)
            summary.warnings += result.count(Severity.WARNING)
            summary.info += result.count(Severity.INFO)
            summary.fixed += result.fixed
        return summary


def print_console_report(results: Sequence[ScanResult]) -> Summary:
    typer.secho("\nAccessibility Scan Report", bold=True, fg=typer.colors.CYAN)
    typer.echo("=" * 60)

    for result in sorted(results, key=lambda r: r.file):
        if not result.issues and not result.fixed:
            continue
        typer.secho(f"\n{result.file}", bold=True)
        typer.echo(f"   Total Issues: {result.total} | Fixed: {result.fixed}\n")
        for issue in result.issues:
            typer.secho(
                f"   {issue.severity.value.upper()} [{issue.type.value}] Line {issue.line}:{issue.column}",
                fg=_SEVERITY_COLORS[issue.severity],
            )
            typer.echo(f"      {issue.message}")
            if issue.fix:
                typer.secho(f"      Auto-fix available: {issue.fix.description}", dim=True)

    summary = Summary.of(results)
    typer.echo("\n" + "=" * 60)
    typer.secho("Summary", bold=True)
    typer.echo(f"   Files Scanned: {summary.files}")
    typer.echo(f"   Total Issues: {summary.issues}")
    typer.secho(f"   Errors: {summary.errors}", fg=typer.colors.RED)
    typer.secho(f"   Warnings: {summary.warnings}", fg=typer.colors.YELLOW)
    typer.secho(f"   Info: {summary.info}", fg=typer.colors.BLUE)
    typer.secho(f"   Auto-fixed: {summary.fixed}", fg=typer.colors.GREEN)
    return summary


def render_json(results: Sequence[ScanResult]) -> str:
    return json.dumps([result.model_dump(mode="json") for result in results], indent=2)


def _render_issue_html(result: ScanResult) -> List[str]:
    parts = []
    for issue in result.issues:
        fix_badge = '<span class="badge">Auto-fixable</span>' if issue.fix else ""
        fix_line = f'<div class="issue-fix">{escape(issue.fix.description)}</div>' if issue.fix else ""
        parts.append(
            f'<div class="issue severity-{issue.severity.value}">'
            f'<div class="issue-header"><span class="issue-type">{issue.type.value}</span> '
            f'<span class="issue-severity">{issue.severity.value}</span> {fix_badge} '
            f'<span class="issue-location">Line {issue.line}:{issue.column}</span></div>'
            f'<div class="issue-message">{escape(issue.message)}</div>'
            f"{fix_line}"
            f'<pre class="issue-code">{escape(issue.code)}</pre>'
            "</div>"
        )
    return parts


_STYLE = """
body { font-family: -apple-system, 'Segoe UI', Roboto, sans-serif; color: #333; background: #f5f5f5; padding: 20px; }
.container { max-width: 1200px; margin: 0 auto; background: #fff; padding: 30px; border-radius: 8px; }
.summary { display: grid; grid-template-columns: repeat(auto-fit, minmax(160px, 1fr)); gap: 16px; }
.card { padding: 16px; border-radius: 6px; background: #ecf0f1; text-align: center; }
.card .number { font-size: 28px; font-weight: bold; }
.file-section { margin: 30px 0; border: 1px solid #ddd; border-radius: 6px; padding: 20px; }
.issue { margin: 12px 0; padding: 12px; border-left: 4px solid #ccc; background: #fafafa; }
.severity-error { border-left-color: #e74c3c; }
.severity-warning { border-left-color: #f39c12; }
.severity-info { border-left-color: #3498db; }
.badge { background: #27ae60; color: #fff; padding: 2px 6px; border-radius: 3px; font-size: 12px; }
.issue-code { background: #2c3e50; color: #ecf0f1; padding: 8px; overflow-x: auto; }
"""


def render_html(results: Sequence[ScanResult]) -> str:
    summary = Summary.of(results)
    cards = "".join(
        f'<div class="card"><h3>{label}</h3><div class="number">{value}</div></div>'
        for label, value in (
            ("Total Issues", summary.issues),
            ("Errors", summary.errors),
            ("Warnings", summary.warnings),
            ("Info", summary.info),
            ("Auto-fixed", summary.fixed),
        )
    )
    sections = []
    for result in sorted(results, key=lambda r: r.file):
        if not result.issues and not result.fixed:
            continue
        sections.append(
            '<div class="file-section">'
            f'<h2 class="file-name">{escape(result.file)}</h2>'
            f"<p>Issues: {result.total} | Fixed: {result.fixed}</p>"
            + "".join(_render_issue_html(result))
            + "</div>"
        )
    body = "".join(sections) or "<p>No accessibility issues found.</p>"
    return (
        '<!DOCTYPE html>\n<html lang="en">\n<head>\n<meta charset="UTF-8">\n'
        "<title>Accessibility Scan Report</title>\n"
        f"<style>{_STYLE}</style>\n</head>\n<body>\n"
        '<main class="container">\n<h1>Accessibility Scan Report</h1>\n'
        f'<div class="summary">{cards}</div>\n{body}\n</main>\n</body>\n</html>\n'
    )


def write_report(results: Sequence[ScanResult], path: Path, as_json: bool = False) -> Path:
    """Write the report file; JSON reports swap a `.html` suffix for `.json`."""
    if as_json:
        if path.suffix.lower() == ".html":
            path = path.with_suffix(".json")
        path.write_text(render_json(results), encoding="utf-8")
    else:
        path.write_text(render_html(results), encoding="utf-8")
    return path
