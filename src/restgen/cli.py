from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from restgen.catalog.loader import load_catalog
from restgen.config import GeneratorConfig
from restgen.errors import GeneratorError
from restgen.log import configure_logging
from restgen.orchestrator.pipeline import build_routes, run_generate


app = typer.Typer(no_args_is_help=True, add_completion=False)

console = Console()
err_console = Console(stderr=True)


def _fail(err: GeneratorError) -> NoReturn:
    err_console.print(f"[bold red]error:[/bold red] {escape(str(err))}", highlight=False, soft_wrap=True)
    raise typer.Exit(code=1)


@app.command()
def generate(
    catalog: Optional[Path] = typer.Option(None, help="Endpoint catalog (JSON array)"),
    out_dir: Optional[Path] = typer.Option(None, help="Directory for the generated .ts files"),
    formatter: str = typer.Option("builtin", help="Formatter: builtin|prettier"),
    types_package: str = typer.Option("@octokit/types", help="Module the generated types import from"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Generate method-types.ts and parameters-and-response-types.ts."""
    configure_logging(verbose)

    config = GeneratorConfig(formatter=formatter, types_package=types_package)
    if catalog is not None:
        config = dataclasses.replace(config, catalog_path=catalog.expanduser())
    if out_dir is not None:
        config = dataclasses.replace(config, output_dir=out_dir.expanduser())

    try:
        run_generate(
            config.resolve(),
            echo=lambda line: console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True),
        )
    except GeneratorError as e:
        _fail(e)


@app.command()
def routes(
    catalog: Optional[Path] = typer.Option(None, help="Endpoint catalog (JSON array)"),
    scope: Optional[str] = typer.Option(None, help="Only show this scope"),
    format: str = typer.Option("table", help="Output format: table|json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Show the normalized route table the types are generated from."""
    configure_logging(verbose)

    config = GeneratorConfig()
    if catalog is not None:
        config = dataclasses.replace(config, catalog_path=catalog.expanduser())
    config = config.resolve()

    fmt = format.lower().strip()
    if fmt not in ("table", "json"):
        raise typer.BadParameter("format must be one of: table, json")

    try:
        table = build_routes(load_catalog(config.catalog_path), config.identifier_prefix)
    except GeneratorError as e:
        _fail(e)

    rows = [
        {"scope": s, "id": mid, **dataclasses.asdict(entry)}
        for s, entries in table.items()
        if scope is None or s == scope
        for mid, entry in entries.items()
    ]

    if fmt == "json":
        console.print(json.dumps(rows, indent=2), markup=False, emoji=False, highlight=False, soft_wrap=True)
        return

    t = Table(show_header=True, header_style="bold")
    t.add_column("SCOPE", no_wrap=True)
    t.add_column("ID")
    t.add_column("ROUTE")
    t.add_column("PREVIEW", no_wrap=True)
    t.add_column("DEPRECATED")

    for r in rows:
        t.add_row(
            r["scope"],
            r["id"],
            f"{r['method']} {r['url']}",
            "yes" if r["has_required_previews"] else "",
            r["deprecated"] or "",
        )

    console.print(f"[bold]Catalog:[/bold] {config.catalog_path}")
    console.print(f"[bold]Routes:[/bold] {len(rows)}")
    console.print(t)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
