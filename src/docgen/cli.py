"""Command-line interface for docgen."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .backends import create_printer_factory
from .config import PRINTER_FORMATS, DocgenConfig
from .exceptions import DocgenError
from .loader import discover_config, load_api_model
from .logger import setup_logger
from .models import ApiModel
from .printer import ApiDocPrinter
from .writer import DocsWriter

app = typer.Typer(
    name="docgen",
    help="Render a pre-computed Utility API model into cross-linked markdown pages",
    add_completion=False,
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbosity level: 0=silent (default), 1=show written files, 2=show checks, 3=debug",
            min=0,
            max=3,
        ),
    ] = 0,
    config: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config file (default: docgen_config.yaml)",
        ),
    ] = None,
) -> None:
    """Global options for docgen commands."""
    setup_logger(verbose)
    ctx.obj = config


def _load(
    ctx: typer.Context,
    model: Path,
    format: str | None,  # noqa: A002
) -> tuple[ApiModel, DocgenConfig]:
    """Load the model and config, applying a --format override.

    The global --config path is stored on the root context by main_callback.
    """
    if format is not None and format not in PRINTER_FORMATS:
        typer.echo(
            f"Error: Invalid format '{format}'. Must be one of: {', '.join(PRINTER_FORMATS)}.",
            err=True,
        )
        raise typer.Exit(1)

    try:
        config = discover_config(model, ctx.find_root().obj)
        api_model = load_api_model(model)
    except (DocgenError, FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    if format is not None:
        config = config.model_copy(
            update={"printer": config.printer.model_copy(update={"format": format})}
        )
    return api_model, config


def _emit(content: bytes, output: Path | None, what: str) -> None:
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_bytes(content)
        typer.echo(f"{what} written to {output}")
    else:
        typer.echo(content.decode("utf-8"), nl=False)


FormatOption = Annotated[
    str | None,
    typer.Option("--format", "-f", help="Markdown dialect (github or techdocs)"),
]


@app.command()
def render(
    ctx: typer.Context,
    model: Annotated[Path, typer.Argument(help="Path to the API model YAML/JSON file")],
    *,
    output: Annotated[Path, typer.Option("--output", "-o", help="Output directory")] = Path(
        "docs/api"
    ),
    format: FormatOption = None,  # noqa: A002 - 'format' is appropriate name for CLI option
) -> None:
    """Render the index and every interface page into a directory."""
    api_model, config = _load(ctx, model, format)

    factory = create_printer_factory(config.printer)
    writer = DocsWriter(ApiDocPrinter(factory, config.index), factory)
    written = writer.write(api_model, output)

    typer.echo(f"Wrote {len(written)} pages to {output}")


@app.command()
def index(
    ctx: typer.Context,
    model: Annotated[Path, typer.Argument(help="Path to the API model YAML/JSON file")],
    *,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
    format: FormatOption = None,  # noqa: A002 - 'format' is appropriate name for CLI option
) -> None:
    """Render only the index page."""
    api_model, config = _load(ctx, model, format)

    doc_printer = ApiDocPrinter(create_printer_factory(config.printer), config.index)
    _emit(doc_printer.print_api_index(api_model.apis), output, "Index")


@app.command()
def page(
    ctx: typer.Context,
    model: Annotated[Path, typer.Argument(help="Path to the API model YAML/JSON file")],
    type_id: Annotated[str, typer.Argument(help="ID of the interface type to render")],
    *,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
    format: FormatOption = None,  # noqa: A002 - 'format' is appropriate name for CLI option
) -> None:
    """Render a single interface page."""
    api_model, config = _load(ctx, model, format)

    interface = api_model.get_interface_by_id(type_id)
    if interface is None:
        typer.echo(f"Error: Unknown interface type '{type_id}'", err=True)
        raise typer.Exit(1)

    doc_printer = ApiDocPrinter(create_printer_factory(config.printer), config.index)
    _emit(doc_printer.print_interface(interface, api_model.apis), output, "Page")


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
