"""Option helpers shared by the normalization commands."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from ..config import NormalizationConfig, get_settings

__all__ = ["resolve_config"]


def resolve_config(
    config_file: Optional[Path],
    *,
    precision: Optional[int] = None,
    leading_zero: Optional[bool] = None,
    default_px: Optional[bool] = None,
    convert_to_px: Optional[bool] = None,
) -> NormalizationConfig:
    """Merge command-line overrides on top of :func:`get_settings`."""

    try:
        settings = get_settings(config_file=config_file)
        return settings.with_overrides(
            float_precision=precision,
            leading_zero=leading_zero,
            default_px=default_px,
            convert_to_px=convert_to_px,
        )
    except (ValidationError, ValueError) as exc:
        raise typer.BadParameter(f"Invalid normalization settings: {exc}") from exc


PRECISION_OPTION = typer.Option(
    None, "--precision", "-p", min=0, max=100, help="Fractional digits kept after rounding"
)
LEADING_ZERO_OPTION = typer.Option(
    None, "--leading-zero/--no-leading-zero", help="Strip the zero in front of pure fractions"
)
DEFAULT_PX_OPTION = typer.Option(None, "--default-px/--no-default-px", help="Drop the implicit 'px' unit")
CONVERT_TO_PX_OPTION = typer.Option(
    None, "--convert-to-px/--no-convert-to-px", help="Rewrite absolute lengths as pixels when shorter"
)
CONFIG_FILE_OPTION = typer.Option(
    None,
    "--config-file",
    exists=True,
    dir_okay=False,
    readable=True,
    help="TOML/YAML file with a [normalization] section",
)
