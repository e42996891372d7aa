"""Typer CLI for the sheet stock inventory."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from sheetstock.application import (
    CommitInput,
    ServiceFactory,
    load_default_seed,
)
from sheetstock.application.config import (
    ConfigError,
    SheetstockConfiguration,
    load_config,
)
from sheetstock.cli.commands import display_config_error, validate_command
from sheetstock.domain import AllocationError, CutRequest, MaterialKind, RemnantPolicy
from sheetstock.infrastructure import (
    CommitReportFormatter,
    InventoryFileError,
    InventoryFormatter,
    SourceFormatter,
    SummaryFormatter,
)

app = typer.Typer(
    name="sheetstock",
    help="Track sheets, scraps, cuts and leftovers of rigid sheet stock.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    store_path: Annotated[
        Path | None,
        typer.Option("--store", "-s", help="Inventory JSON file (overrides config)"),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Sheet stock inventory and cut allocation."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"config_file": config_file, "store_path": store_path}


def _get_factory(ctx: typer.Context) -> ServiceFactory:
    """Build the service factory from the global options."""
    options = ctx.obj or {}
    try:
        config_file = options.get("config_file")
        config = load_config(config_file) if config_file else SheetstockConfiguration()
    except ConfigError as e:
        display_config_error(e)
        raise typer.Exit(code=1)

    if options.get("store_path") is not None:
        config.store.path = options["store_path"]

    try:
        return ServiceFactory.from_config(config)
    except InventoryFileError as e:
        typer.echo(f"Error: {e.message}", err=True)
        for detail in e.details:
            typer.echo(f"  {detail}", err=True)
        raise typer.Exit(code=1)


def _parse_cuts(values: list[str]) -> list[CutRequest]:
    try:
        return [CutRequest.parse(value) for value in values]
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e


@app.command()
def init(ctx: typer.Context) -> None:
    """Load the starter stock into an empty inventory."""
    factory = _get_factory(ctx)
    service = factory.get_inventory_service()
    if any(service.list(kind) for kind in MaterialKind):
        typer.echo("Inventory is not empty; nothing loaded.", err=True)
        raise typer.Exit(code=1)
    created = load_default_seed(service)
    typer.echo(f"Loaded {created} starter record(s).")


@app.command(name="list")
def list_records(
    ctx: typer.Context,
    kind: Annotated[MaterialKind, typer.Argument(help="sheet, scrap, leftover or cut")],
) -> None:
    """List the records of one kind."""
    factory = _get_factory(ctx)
    records = factory.get_inventory_service().list(kind)
    typer.echo(InventoryFormatter().format(kind, records))


@app.command()
def resolve(
    ctx: typer.Context,
    kind: Annotated[MaterialKind, typer.Argument(help="sheet, scrap or leftover")],
    source_id: Annotated[str, typer.Argument(help="Record id")],
) -> None:
    """Show a cut source, or fail if it cannot be cut from."""
    factory = _get_factory(ctx)
    try:
        source = factory.get_source_resolver().resolve(kind, source_id)
    except AllocationError as e:
        typer.echo(CommitReportFormatter().format_rejection(e.to_rejection()), err=True)
        raise typer.Exit(code=1)
    typer.echo(SourceFormatter().format(source))


@app.command()
def check(
    ctx: typer.Context,
    kind: Annotated[MaterialKind, typer.Argument(help="sheet, scrap or leftover")],
    source_id: Annotated[str, typer.Argument(help="Record id")],
    cuts: Annotated[
        list[str], typer.Option("--cut", help="Cut as WIDTHxHEIGHT in mm (repeatable)")
    ],
) -> None:
    """Validate cuts against a source without recording them."""
    factory = _get_factory(ctx)
    output = factory.create_check_command().execute(kind, source_id, _parse_cuts(cuts))
    formatter = CommitReportFormatter()
    for cut in output.accepted:
        typer.echo(f"OK {cut}")
    for rejection in output.rejections:
        typer.echo(formatter.format_rejection(rejection), err=True)
    if not output.is_valid:
        raise typer.Exit(code=1)


@app.command()
def cut(
    ctx: typer.Context,
    kind: Annotated[MaterialKind, typer.Argument(help="sheet, scrap or leftover")],
    source_id: Annotated[str, typer.Argument(help="Record id")],
    cuts: Annotated[
        list[str], typer.Option("--cut", help="Cut as WIDTHxHEIGHT in mm (repeatable)")
    ],
    policy: Annotated[
        RemnantPolicy | None,
        typer.Option("--policy", "-p", help="Leftover policy (default from config)"),
    ] = None,
    remnant: Annotated[
        str | None,
        typer.Option("--remnant", help="Measured remnant WIDTHxHEIGHT (manual policy)"),
    ] = None,
) -> None:
    """Record a cut batch against a source."""
    factory = _get_factory(ctx)
    commit_input = CommitInput(
        source_kind=kind,
        source_id=source_id,
        cuts=_parse_cuts(cuts),
        policy=policy or factory.default_policy,
        remnant=_parse_cuts([remnant])[0] if remnant else None,
    )
    output = factory.create_commit_command().execute(commit_input)

    formatter = CommitReportFormatter()
    if not output.is_valid:
        assert output.rejection is not None
        typer.echo(formatter.format_rejection(output.rejection), err=True)
        raise typer.Exit(code=1)

    assert output.result is not None
    typer.echo(formatter.format(output.result))


@app.command()
def summary(ctx: typer.Context) -> None:
    """Show inventory totals."""
    factory = _get_factory(ctx)
    typer.echo(SummaryFormatter().format(factory.get_summarizer().summarize()))


if __name__ == "__main__":
    app()
