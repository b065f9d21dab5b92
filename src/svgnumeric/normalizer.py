"""Attribute-level numeric normalization.

Each attribute value is handled on its own: it is either rewritten as a
shorter equivalent or returned exactly as received. Nothing here raises
for string input.
"""
from __future__ import annotations

import logging
import re
from typing import Dict, Mapping, Optional

from .config import NormalizationConfig
from .numeric import (
    UnitKind,
    convert_to_px,
    format_number,
    parse_numeric_token,
    parse_plain_number,
    round_and_format,
    round_to_precision,
    strip_leading_zero,
)

__all__ = [
    "GEOMETRY_ATTRIBUTE",
    "VERSION_ATTRIBUTE",
    "normalize_attribute",
    "normalize_attributes",
    "normalize_geometry_list",
]

LOGGER = logging.getLogger(__name__)

GEOMETRY_ATTRIBUTE = "viewBox"
# a text string such as "1.1", never a measurement
VERSION_ATTRIBUTE = "version"

_GEOMETRY_SEPARATOR = re.compile(r"\s,?\s*|,\s*")
_DEFAULT_CONFIG = NormalizationConfig()


def normalize_attribute(
    value: str,
    config: Optional[NormalizationConfig] = None,
    *,
    name: Optional[str] = None,
) -> str:
    """Round, convert and shorten a single numeric attribute value.

    Values that are not exactly one number with an optional known unit,
    and any value of the ``version`` attribute, come back unchanged.
    """

    if name == VERSION_ATTRIBUTE:
        return value
    config = config or _DEFAULT_CONFIG
    token = parse_numeric_token(value)
    if token is None:
        return value

    precision = config.float_precision
    number = round_to_precision(token.parsed_value, precision)
    unit = token.unit

    if config.convert_to_px:
        px_value = convert_to_px(token, precision)
        if px_value is not None:
            number, unit = px_value, UnitKind.PX

    text = strip_leading_zero(number) if config.leading_zero else format_number(number)
    if unit is None or (config.default_px and unit is UnitKind.PX):
        suffix = ""
    else:
        suffix = unit.value

    result = text + suffix
    if result != value:
        LOGGER.debug("Normalized %s=%r to %r", name or "<value>", value, result)
    return result


def normalize_geometry_list(value: str, config: Optional[NormalizationConfig] = None) -> str:
    """Round every number of a ``viewBox``-style list and join with spaces.

    Tokens that are not plain numbers keep their text and position.
    """

    config = config or _DEFAULT_CONFIG
    rendered = []
    for token in _GEOMETRY_SEPARATOR.split(value):
        number = parse_plain_number(token)
        if number is None:
            rendered.append(token)
        else:
            rendered.append(round_and_format(number, config.float_precision))
    return " ".join(rendered)


def normalize_attributes(
    attributes: Mapping[str, str],
    config: Optional[NormalizationConfig] = None,
) -> Dict[str, str]:
    """Normalize all attributes of one element, preserving their order."""

    config = config or _DEFAULT_CONFIG
    result = dict(attributes)
    if GEOMETRY_ATTRIBUTE in result:
        result[GEOMETRY_ATTRIBUTE] = normalize_geometry_list(result[GEOMETRY_ATTRIBUTE], config)
    for name, value in result.items():
        result[name] = normalize_attribute(value, config, name=name)
    return result
