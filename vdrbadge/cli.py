from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from vdrbadge.badges.renderer import BadgeRenderer
from vdrbadge.core import metrics as metrics_mod
from vdrbadge.core.links import resolve_href
from vdrbadge.core.models import ViolationMetrics, VulnerabilityMetrics
from vdrbadge.core.utils import DEFAULT_ROUNDED_PIXELS, BadgeError, get_base_url, load_vdr, setup_logging

app = typer.Typer(help="VDR badge CLI")

BADGE_KINDS = ("vulns", "violations", "combined")


def _load_or_exit(vdr_file: Path):
    try:
        return load_vdr(vdr_file)
    except BadgeError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)


@app.command()
def badge(
    vdr_file: Path = typer.Argument(..., help="Path to a CycloneDX VDR JSON file"),
    kind: str = typer.Option("vulns", "--kind", help="Badge kind: vulns, violations, or combined"),
    href: Optional[str] = typer.Option(None, "--href", help="URL to link the badge to"),
    rounded_pixels: int = typer.Option(DEFAULT_ROUNDED_PIXELS, "--rounded-pixels", help="Corner radius in pixels"),
    stacked: bool = typer.Option(False, "--stacked", help="Stack combined badges vertically"),
    output: Optional[Path] = typer.Option(None, "--output", help="Output SVG file path"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """Render an SVG badge from a VDR file."""
    setup_logging(verbose=verbose)
    if kind not in BADGE_KINDS:
        typer.echo(f"Unknown badge kind '{kind}'. Choose one of: {', '.join(BADGE_KINDS)}", err=True)
        raise typer.Exit(code=2)

    vdr = _load_or_exit(vdr_file)
    resolved_href = resolve_href(vdr, href, get_base_url())
    renderer = BadgeRenderer()

    try:
        if kind == "vulns":
            svg = renderer.render_vulnerabilities(metrics_mod.summarize_vulnerabilities(vdr), resolved_href, rounded_pixels)
        elif kind == "violations":
            svg = renderer.render_violations(metrics_mod.summarize_violations(vdr), resolved_href, rounded_pixels)
        else:
            svg = renderer.render_combined(
                metrics_mod.summarize_vulnerabilities(vdr),
                metrics_mod.summarize_violations(vdr),
                resolved_href,
                rounded_pixels,
                stacked=stacked,
            )
    except BadgeError as exc:
        typer.echo(f"Badge rendering failed: {exc}", err=True)
        raise typer.Exit(code=1)

    if output:
        output.write_text(svg, encoding="utf-8")
        typer.echo(f"Badge saved to: {output}")
    else:
        typer.echo(svg)


def _metrics_rows(vulns: VulnerabilityMetrics, violations: ViolationMetrics) -> list[list[str]]:
    def cell(available: bool, value: int) -> str:
        return str(value) if available else "-"

    return [
        ["Critical", cell(vulns.available, vulns.critical)],
        ["High", cell(vulns.available, vulns.high)],
        ["Medium", cell(vulns.available, vulns.medium)],
        ["Low", cell(vulns.available, vulns.low)],
        ["Unassigned", cell(vulns.available, vulns.unassigned)],
        ["Policy fail", cell(violations.available, violations.fail)],
        ["Policy warn", cell(violations.available, violations.warn)],
        ["Policy info", cell(violations.available, violations.info)],
    ]


def print_table(vulns: VulnerabilityMetrics, violations: ViolationMetrics) -> None:
    """Pretty-print both summaries in a simple table."""
    headers = ["Metric", "Count"]
    rows = _metrics_rows(vulns, violations)

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            col_widths[i] = max(col_widths[i], len(cell))

    def fmt_row(values):
        return " | ".join(str(v).ljust(col_widths[i]) for i, v in enumerate(values))

    typer.echo(fmt_row(headers))
    typer.echo("-+-".join("-" * w for w in col_widths))
    for row in rows:
        typer.echo(fmt_row(row))


@app.command()
def summary(
    vdr_file: Path = typer.Argument(..., help="Path to a CycloneDX VDR JSON file"),
    format: str = typer.Option("table", "--format", help="Output format: table or json"),
):
    """Print vulnerability and policy violation counts for a VDR file."""
    vdr = _load_or_exit(vdr_file)
    vulns = metrics_mod.summarize_vulnerabilities(vdr)
    violations = metrics_mod.summarize_violations(vdr)

    if format == "json":
        output_data = {
            "vulnerabilities": {**vulns.model_dump(), "total": vulns.total},
            "violations": {**violations.model_dump(), "total": violations.total},
        }
        typer.echo(json.dumps(output_data, indent=2))
        return

    if format != "table":
        typer.echo(f"Warning: Unknown format '{format}', using table format", err=True)
    print_table(vulns, violations)
    if not vulns.available:
        typer.echo("\nNo vulnerability metrics available")
    if not violations.available:
        typer.echo("No policy violation metrics available")


if __name__ == "__main__":
    app()
