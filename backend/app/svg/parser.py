"""SVG document reader — raw SVG string → per-shape path sources.

Each ``ShapeSource`` carries what the path interpreter needs (the ``d``
strings and an optional translation) plus the metadata map series keep
(name and fill flag). When the document's paths live under different
parents, every ``<g>`` below their last common ancestor becomes one shape.
"""

from __future__ import annotations

import logging
import math
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from app.svg.errors import SvgDocumentError

logger = logging.getLogger(__name__)

_INKSCAPE_LABEL = "{http://www.inkscape.org/namespaces/inkscape}label"
_TRANSLATE_RE = re.compile(r"translate\(\s*([^)]*?)\s*\)")
_FILL_NONE_RE = re.compile(r"fill\s?:\s?none")


@dataclass
class ShapeSource:
    """One shape to trace: a lone ``<path>`` or all paths of a ``<g>``."""

    label: str
    name: str | None = None
    paths: list[str] = field(default_factory=list)
    translate: tuple[float, float] | None = None
    has_fill: bool = False
    is_group: bool = False


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def get_translate(elem: ET.Element) -> tuple[float, float] | None:
    """``transform="translate(10, 20)"`` → ``(10.0, 20.0)``; ``translate(5)`` → ``(5.0, 0.0)``."""
    match = _TRANSLATE_RE.search(elem.get("transform") or "")
    if not match:
        return None
    parts = [p for p in re.split(r"[\s,]+", match.group(1)) if p]
    try:
        values = [float(p) for p in parts]
    except ValueError:
        logger.debug("Ignoring unreadable transform %r", elem.get("transform"))
        return None
    if not all(math.isfinite(v) for v in values):
        logger.debug("Ignoring non-finite transform %r", elem.get("transform"))
        return None
    if len(values) == 1:
        return (values[0], 0.0)
    if len(values) == 2:
        return (values[0], values[1])
    return None


def get_name(elem: ET.Element) -> str | None:
    return elem.get(_INKSCAPE_LABEL) or elem.get("id") or elem.get("class")


def has_fill(elem: ET.Element) -> bool:
    if _FILL_NONE_RE.search(elem.get("style") or ""):
        return False
    return (elem.get("fill") or "").strip().lower() != "none"


def _lineage(elem: ET.Element, parents: dict[ET.Element, ET.Element]) -> list[ET.Element]:
    chain = [elem]
    while chain[-1] in parents:
        chain.append(parents[chain[-1]])
    chain.reverse()
    return chain


def _last_common_ancestor(
    paths: list[ET.Element], parents: dict[ET.Element, ET.Element]
) -> ET.Element:
    common = _lineage(paths[0], parents)
    for path in paths[1:]:
        lineage = _lineage(path, parents)
        depth = 0
        while depth < min(len(common), len(lineage)) and common[depth] is lineage[depth]:
            depth += 1
        common = common[:depth]
    return common[-1]


def _unique_label(base: str, used: set[str]) -> str:
    """Shapes often share a class name; repeats get a ``#n`` suffix."""
    label, n = base, 1
    while label in used:
        label = f"{base}#{n}"
        n += 1
    used.add(label)
    return label


def extract_shapes(svg_text: str) -> list[ShapeSource]:
    """Read an SVG document into shape sources, in document order (groups first)."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgDocumentError(f"Unreadable SVG document: {e}") from e

    parents = {child: parent for parent in root.iter() for child in parent}
    all_paths = [e for e in root.iter() if _local(e.tag) == "path"]

    # Clip paths and other definitions are never drawn
    claimed: set[ET.Element] = set()
    for defs in (e for e in root.iter() if _local(e.tag) == "defs"):
        claimed.update(e for e in defs.iter() if _local(e.tag) == "path")

    drawable = [p for p in all_paths if p not in claimed]
    if not drawable:
        logger.info("SVG contains no drawable paths")
        return []

    shapes: list[ShapeSource] = []
    used_labels: set[str] = set()
    handle_groups = any(parents.get(p) is not parents.get(drawable[0]) for p in drawable[1:])

    if handle_groups:
        ancestor = _last_common_ancestor(drawable, parents)
        groups = [g for g in ancestor.iter() if _local(g.tag) == "g" and g is not ancestor]
        for i, g in enumerate(groups):
            members = [p for p in g.iter() if _local(p.tag) == "path" and p not in claimed]
            if not members:
                continue
            claimed.update(members)
            name = get_name(g)
            shapes.append(
                ShapeSource(
                    label=_unique_label(name or f"g{i}", used_labels),
                    name=name,
                    paths=[p.get("d") or "" for p in members],
                    translate=get_translate(g),
                    has_fill=any(has_fill(p) for p in members),
                    is_group=True,
                )
            )

    group_count = len(shapes)
    for i, p in enumerate(all_paths):
        if p in claimed:
            continue
        name = get_name(p)
        shapes.append(
            ShapeSource(
                label=_unique_label(name or f"path{i}", used_labels),
                name=name,
                paths=[p.get("d") or ""],
                translate=get_translate(p),
                has_fill=has_fill(p),
            )
        )

    logger.info(
        "Extracted %d shapes (%d groups) from %d paths",
        len(shapes),
        group_count,
        len(all_paths),
    )
    return shapes
