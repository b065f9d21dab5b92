"""Normalization settings and their resolution from files and environment.

:func:`get_settings` returns the :class:`NormalizationConfig` used by the
CLI and the HTTP service. Values come from the built-in defaults, then from
the ``[normalization]`` section of a TOML/YAML document (pointed to by
``SVGNUMERIC_CONFIG_FILE`` or passed explicitly), then from individual
``SVGNUMERIC_*`` environment variables.
"""
from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field

__all__ = ["NormalizationConfig", "get_settings", "reset_settings"]

_ENV_PREFIX = "SVGNUMERIC_"
_ENV_FIELDS = {
    "FLOAT_PRECISION": "float_precision",
    "LEADING_ZERO": "leading_zero",
    "DEFAULT_PX": "default_px",
    "CONVERT_TO_PX": "convert_to_px",
}
_CONFIG_CACHE: Optional["NormalizationConfig"] = None
_CONFIG_SOURCE: Optional[Path] = None


class NormalizationConfig(BaseModel):
    """Options shared by every attribute of a document pass."""

    float_precision: int = Field(
        default=3, ge=0, le=100, alias="floatPrecision", description="Fractional digits kept after rounding"
    )
    leading_zero: bool = Field(
        default=True, alias="leadingZero", description="Strip the zero in front of pure fractions"
    )
    default_px: bool = Field(default=True, alias="defaultPx", description="Drop the implicit 'px' unit")
    convert_to_px: bool = Field(
        default=True, alias="convertToPx", description="Rewrite absolute lengths as pixels when shorter"
    )

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    def with_overrides(self, **overrides: Any) -> "NormalizationConfig":
        """Return a copy with every non-``None`` override applied.

        Keys may be field names or their camelCase aliases.
        """

        aliases = {field.alias: name for name, field in type(self).model_fields.items() if field.alias}
        values = {aliases.get(key, key): value for key, value in overrides.items() if value is not None}
        if not values:
            return self
        return NormalizationConfig.model_validate({**self.model_dump(), **values})


def _load_config_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config file '{path}' does not exist")
    suffix = path.suffix.lower()
    if suffix == ".toml":
        with path.open("rb") as handle:
            return tomllib.load(handle)
    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
            return loaded or {}
    raise ValueError(f"Unsupported config file format: '{suffix}'")


def _coalesce_mapping(source: Mapping[str, Any] | None) -> Mapping[str, Any]:
    if not isinstance(source, Mapping):
        return {}
    return source


def _environment_values(env: Mapping[str, str]) -> Dict[str, str]:
    values: Dict[str, str] = {}
    for suffix, field in _ENV_FIELDS.items():
        raw = env.get(_ENV_PREFIX + suffix)
        if raw is not None and raw.strip():
            values[field] = raw.strip()
    return values


def _build_config(config_file: Optional[Path]) -> NormalizationConfig:
    file_values: Mapping[str, Any] = {}
    if config_file is not None:
        config_data = _load_config_file(config_file.expanduser().resolve())
        file_values = _coalesce_mapping(config_data.get("normalization"))

    merged: Dict[str, Any] = dict(file_values)
    merged.update(_environment_values(os.environ))
    return NormalizationConfig().with_overrides(**merged)


def get_settings(*, refresh: bool = False, config_file: str | Path | None = None) -> NormalizationConfig:
    """Return the cached :class:`NormalizationConfig`.

    Parameters
    ----------
    refresh:
        When ``True`` the cached configuration is discarded and recomputed.
    config_file:
        Optional explicit path to the configuration document. When provided the
        returned instance is not cached globally, allowing callers (e.g. tests)
        to override settings temporarily.
    """

    global _CONFIG_CACHE, _CONFIG_SOURCE

    if config_file is not None:
        return _build_config(Path(config_file))

    env_path = os.getenv(_ENV_PREFIX + "CONFIG_FILE")
    source_path = Path(env_path).expanduser() if env_path else None

    if refresh or _CONFIG_CACHE is None or _CONFIG_SOURCE != source_path:
        _CONFIG_CACHE = _build_config(source_path)
        _CONFIG_SOURCE = source_path

    return _CONFIG_CACHE


def reset_settings() -> None:
    """Clear the cached configuration (mainly useful for tests)."""

    global _CONFIG_CACHE, _CONFIG_SOURCE
    _CONFIG_CACHE = None
    _CONFIG_SOURCE = None
