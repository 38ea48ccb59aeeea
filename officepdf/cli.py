"""CLI entry point for officepdf."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich import print as rprint
from rich.syntax import Syntax
from rich.table import Table

from officepdf.automation import ComApartment
from officepdf.collector import collect
from officepdf.config import OfficePdfConfig, load_config
from officepdf.config.loader import CONFIG_FILENAME, DEFAULT_CONFIG_TEMPLATE
from officepdf.controller import ConversionController
from officepdf.errors import CollectionError, OutputDirError, SessionStartError
from officepdf.logging_setup import setup_logging
from officepdf.models import BatchResult, ConversionJob, JobStatus
from officepdf.planner import ensure_output_dir, resolve_output_dir

app = typer.Typer(
    name="officepdf",
    help="Batch-convert Word and PowerPoint documents to PDF through Microsoft Office.",
)

config_app = typer.Typer(help="Manage officepdf configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: OfficePdfConfig | None = None


def _get_config() -> OfficePdfConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to officepdf.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


_STATUS_STYLE: dict[JobStatus, str] = {
    JobStatus.CONVERTED: "green",
    JobStatus.SKIPPED: "yellow",
    JobStatus.OPEN_FAILED: "red",
    JobStatus.EXPORT_FAILED: "red",
}


def _display_batch_result(result: BatchResult) -> None:
    """Summary line plus a table of every file that did not convert."""
    rprint(
        f"[bold]Done:[/bold] {result.converted} converted, "
        f"{result.failed} failed, {result.skipped} skipped "
        f"({result.attempted} of {result.discovered} attempted)"
    )
    problems = [o for o in result.outcomes if not o.ok]
    if not problems:
        return
    table = Table(title=f"Not converted ({len(problems)})")
    table.add_column("File", style="cyan")
    table.add_column("Status")
    table.add_column("Reason", style="dim")
    for o in problems:
        style = _STATUS_STYLE[o.status]
        table.add_row(str(o.job.source), f"[{style}]{o.status.value}[/{style}]", o.error or "-")
    rprint(table)


def _report_progress(index: int, total: int, job: ConversionJob) -> None:
    rprint(f"[dim]({index}/{total})[/dim] {job.source.name} -> {job.destination.name}")


@app.command()
def convert(
    input_dir: str | None = typer.Argument(
        None, help="Directory to scan recursively (prompted when omitted)"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Directory for the PDFs (prompted when omitted)"
    ),
    wait: bool | None = typer.Option(
        None, "--wait/--no-wait", help="Wait for Enter before exiting"
    ),
) -> None:
    """Convert every Word and PowerPoint document under a directory to PDF."""
    cfg = _get_config()
    setup_logging(cfg)
    interactive = input_dir is None

    if input_dir is None:
        input_dir = typer.prompt("Input path")
    input_dir = input_dir.strip()
    if output is None and interactive:
        output = typer.prompt(
            f'Output path (leave blank to save to the "{cfg.output.dir_name}" '
            "directory under the input path)",
            default="",
            show_default=False,
        )
    out_dir = resolve_output_dir(input_dir, output, cfg.output.dir_name).absolute()

    try:
        paths = collect(input_dir, cfg.collector, exclude=out_dir)
    except CollectionError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    rprint(f"== {len(paths)} files found ==")
    rprint("Converting...")

    try:
        ensure_output_dir(out_dir)
    except OutputDirError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        with ComApartment(isolated=cfg.automation.isolated_instance) as apartment:
            controller = ConversionController(apartment, cfg.conversion)
            result = controller.convert(paths, out_dir, on_progress=_report_progress)
    except SessionStartError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    _display_batch_result(result)
    rprint(f"[green]PDFs written to[/green] {out_dir}")

    if wait is None:
        wait = cfg.wait_for_exit
    if wait:
        typer.prompt(
            "Press Enter to exit...", default="", show_default=False, prompt_suffix=""
        )


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default officepdf.yaml in current directory."""
    target = Path(CONFIG_FILENAME)
    if target.exists() and not force:
        rprint(f"[yellow]{CONFIG_FILENAME} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
