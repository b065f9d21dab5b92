"""svgnumeric – shorten numeric values in SVG attributes."""

from ._version import __version__
from .config import NormalizationConfig, get_settings
from .normalizer import normalize_attribute, normalize_attributes, normalize_geometry_list

__all__ = [
    "__version__",
    "NormalizationConfig",
    "get_settings",
    "normalize_attribute",
    "normalize_attributes",
    "normalize_geometry_list",
    "numeric",
    "svg",
]
