"""``dependency-sorter`` command line interface.

Usage:
    dependency-sorter sort records.yaml
    dependency-sorter sort records.json --weight-field priority --json
    dependency-sorter sort records.yaml --config sorter.yaml
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from .config import SorterOptions, load_options
from .errors import SorterError
from .normalizer import read_field
from .records import load_records
from .sorter import Sorter

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name="dependency-sorter",
    help="Order records by dependencies, biased by signed weights",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def callback() -> None:
    """Weighted dependency sorter."""


@app.command("sort")
def sort_command(
    records_file: Path = typer.Argument(..., help="YAML or JSON file holding a list of records"),
    config_file: Optional[Path] = typer.Option(None, "--config", "-c", help="Options file (YAML or JSON)"),
    id_field: Optional[str] = typer.Option(None, "--id-field", help="Record field holding the id"),
    weight_field: Optional[str] = typer.Option(None, "--weight-field", help="Record field holding the weight"),
    depends_field: Optional[str] = typer.Option(None, "--depends-field", help="Record field holding dependencies"),
    default_weight: Optional[float] = typer.Option(None, "--default-weight", help="Weight for records without one"),
    json_output: bool = typer.Option(False, "--json", help="Print the sorted records as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Sort the records in RECORDS_FILE and print them in order."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        options = load_options(config_file) if config_file else SorterOptions()
        options = options.merged(
            {
                "id_field": id_field,
                "weight_field": weight_field,
                "depends_field": depends_field,
                "default_weight": default_weight,
            }
        )
        records = load_records(records_file)
        ordered = Sorter(options).sort(records)
    except SorterError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if json_output:
        print(json.dumps(_json_safe(ordered), indent=2, default=str, allow_nan=False))
        return

    console.print(_render_table(ordered, options))


def _json_safe(value: Any) -> Any:
    """Replace non-finite floats so the output stays strict JSON."""
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def _render_table(records: list[Any], options: SorterOptions) -> Table:
    table = Table(title="Sorted Records")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Id", style="cyan")
    table.add_column("Weight", justify="right", style="magenta")
    table.add_column("Depends")

    for position, record in enumerate(records, start=1):
        record_id = read_field(record, options.id_field)
        weight = read_field(record, options.weight_field)
        depends = read_field(record, options.depends_field)
        if isinstance(depends, (list, tuple)):
            depends = ", ".join(str(d) for d in depends)
        table.add_row(
            str(position),
            "[dim]<anonymous>[/dim]" if record_id is None else str(record_id),
            "" if weight is None else str(weight),
            "" if not depends else str(depends),
        )
    return table


def main() -> None:
    app()


if __name__ == "__main__":
    main()
