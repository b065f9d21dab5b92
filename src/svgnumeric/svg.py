"""Apply attribute normalization to SVG documents parsed with ElementTree."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Tuple

from .config import NormalizationConfig
from .normalizer import normalize_attributes

__all__ = ["SVG_NAMESPACE", "normalize_element", "normalize_svg_file", "normalize_tree"]

LOGGER = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"
_EXTRA_NAMESPACES = {
    "xlink": "http://www.w3.org/1999/xlink",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
}


def normalize_element(element: ET.Element, config: Optional[NormalizationConfig] = None) -> int:
    """Rewrite the attributes of ``element`` in place.

    Returns the number of attributes whose value changed.
    """

    if not element.attrib:
        return 0
    updated = normalize_attributes(element.attrib, config)
    changed = 0
    for name, value in updated.items():
        if element.attrib[name] != value:
            element.set(name, value)
            changed += 1
    return changed


def normalize_tree(root: ET.Element, config: Optional[NormalizationConfig] = None) -> Tuple[int, int]:
    """Normalize ``root`` and all of its descendants.

    Returns ``(elements_visited, attributes_changed)``.
    """

    elements = 0
    changed = 0
    for element in root.iter():
        elements += 1
        changed += normalize_element(element, config)
    return elements, changed


def normalize_svg_file(
    source: Path,
    destination: Optional[Path] = None,
    config: Optional[NormalizationConfig] = None,
) -> Tuple[int, int]:
    """Normalize the SVG at ``source`` and write it to ``destination``.

    ``destination`` defaults to ``source``. XML errors propagate as
    :class:`xml.etree.ElementTree.ParseError`.
    """

    ET.register_namespace("", SVG_NAMESPACE)
    for prefix, uri in _EXTRA_NAMESPACES.items():
        ET.register_namespace(prefix, uri)

    tree = ET.parse(source)
    elements, changed = normalize_tree(tree.getroot(), config)

    target = Path(destination) if destination is not None else Path(source)
    target.parent.mkdir(parents=True, exist_ok=True)
    tree.write(target, encoding="utf-8", xml_declaration=True)
    LOGGER.debug("Wrote %s (%d elements, %d attributes changed)", target, elements, changed)
    return elements, changed
