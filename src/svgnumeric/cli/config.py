"""Inspect the normalization settings resolved from files and environment."""
from __future__ import annotations

import json
import os
from pathlib import Path

import typer

from .options import CONFIG_FILE_OPTION, resolve_config

__all__ = ["app"]

app = typer.Typer(help="Inspect normalization settings.", add_completion=False)


@app.command("show")
def show_config(config_file: Path = CONFIG_FILE_OPTION) -> None:
    """Print the effective settings as JSON."""

    settings = resolve_config(config_file)
    if config_file:
        source = str(config_file)
    else:
        source = os.getenv("SVGNUMERIC_CONFIG_FILE") or "environment"
    payload = {"config_source": source, "normalization": settings.model_dump(by_alias=True)}
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
