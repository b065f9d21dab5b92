import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional

import typer

from .._version import __version__
from ..normalizer import normalize_attribute, normalize_attributes
from ..svg import normalize_svg_file
from ..utils.logging import configure_json_logger, flush_handlers, generate_trace_id, log_event
from .config import app as config_app
from .options import (
    CONFIG_FILE_OPTION,
    CONVERT_TO_PX_OPTION,
    DEFAULT_PX_OPTION,
    LEADING_ZERO_OPTION,
    PRECISION_OPTION,
    resolve_config,
)


__all__ = ["app", "run"]


app = typer.Typer(help="Round and shorten numeric values in SVG attributes", add_completion=False)


@app.callback(invoke_without_command=True)
def version_callback(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", help="Show svgnumeric version and exit", is_eager=True),
) -> None:
    """Handle global options before any sub-command executes."""

    if version:
        typer.echo(f"svgnumeric {__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


app.add_typer(config_app, name="config")


@app.command("value")
def value_command(
    value: str = typer.Argument(..., help="Attribute value to normalize (use -- before negative numbers)"),
    name: Optional[str] = typer.Option(None, "--name", help="Attribute name, e.g. 'viewBox' or 'version'"),
    precision: Optional[int] = PRECISION_OPTION,
    leading_zero: Optional[bool] = LEADING_ZERO_OPTION,
    default_px: Optional[bool] = DEFAULT_PX_OPTION,
    convert_to_px: Optional[bool] = CONVERT_TO_PX_OPTION,
    config_file: Path = CONFIG_FILE_OPTION,
) -> None:
    """Print the normalized form of a single attribute value."""

    config = resolve_config(
        config_file,
        precision=precision,
        leading_zero=leading_zero,
        default_px=default_px,
        convert_to_px=convert_to_px,
    )
    if name is None:
        typer.echo(normalize_attribute(value, config))
    else:
        typer.echo(normalize_attributes({name: value}, config)[name])


@app.command("file")
def file_command(
    input_path: Path = typer.Argument(..., exists=True, dir_okay=False, help="SVG document to normalize"),
    output_path: Optional[Path] = typer.Option(
        None, "--output", "-o", dir_okay=False, help="Destination file (default: overwrite the input)"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", dir_okay=False, help="Optional JSONL log path"),
    precision: Optional[int] = PRECISION_OPTION,
    leading_zero: Optional[bool] = LEADING_ZERO_OPTION,
    default_px: Optional[bool] = DEFAULT_PX_OPTION,
    convert_to_px: Optional[bool] = CONVERT_TO_PX_OPTION,
    config_file: Path = CONFIG_FILE_OPTION,
) -> None:
    """Normalize every numeric attribute of an SVG document."""

    config = resolve_config(
        config_file,
        precision=precision,
        leading_zero=leading_zero,
        default_px=default_px,
        convert_to_px=convert_to_px,
    )
    destination = output_path or input_path

    logger = configure_json_logger(log_file)
    trace_id = generate_trace_id()
    log_event(
        logger,
        "normalize.start",
        trace_id=trace_id,
        input=str(input_path),
        output=str(destination),
        config=config.model_dump(by_alias=True),
    )

    try:
        elements, changed = normalize_svg_file(input_path, destination, config)
    except ET.ParseError as exc:
        log_event(logger, "normalize.failed", trace_id=trace_id, level=logging.ERROR, error=str(exc))
        flush_handlers(logger)
        typer.echo(f"Cannot parse {input_path}: {exc}", err=True)
        raise typer.Exit(code=1) from exc

    log_event(
        logger,
        "normalize.completed",
        trace_id=trace_id,
        elements=elements,
        changed=changed,
    )
    flush_handlers(logger)

    typer.echo(
        json.dumps(
            {"output": str(destination), "elements": elements, "changed": changed},
            indent=2,
            ensure_ascii=False,
        )
    )


def run() -> None:
    """Entry point compatible with ``python -m svgnumeric.cli.main`` and console scripts."""

    from typer.main import get_command

    cli = get_command(app)
    cli()


if __name__ == "__main__":
    run()
