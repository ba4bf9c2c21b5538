"""Text-level SVG manipulation for merging two badges into one document.

The fragments come from our own templates, so a narrow attribute grammar is
enough: ids are declared as ``id="..."`` and referenced as ``url(#...)``,
``href="#..."`` or ``xlink:href="#..."``.
"""

from __future__ import annotations

import logging
import re

from vdrbadge.core.models import SvgDimensions
from vdrbadge.core.utils import SvgCompositionError

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

ROOT_TAG_PATTERN = re.compile(r"<svg(?=[\s/>])[^>]*>")
WIDTH_PATTERN = re.compile(r'(?<![\w:-])width="(\d+)"')
HEIGHT_PATTERN = re.compile(r'(?<![\w:-])height="(\d+)"')
ID_PATTERN = re.compile(r'(?<![\w:-])id="([^"]+)"')
URL_REF_PATTERN = re.compile(r"url\(#([^)]+)\)")
HREF_REF_PATTERN = re.compile(r'(?<![\w:-])((?:xlink:)?href)="#([^"]+)"')


def defined_ids(svg: str) -> set[str]:
    return set(ID_PATTERN.findall(svg))


def uniquify_ids(svg: str, prefix: str) -> str:
    """Prefix every id defined in ``svg`` along with the references to it.

    Ids that are referenced but not defined in this fragment are left alone.
    """
    ids = defined_ids(svg)
    if not ids:
        return svg

    def rename(ref: str) -> str:
        return prefix + ref if ref in ids else ref

    updated = ID_PATTERN.sub(lambda m: f'id="{rename(m.group(1))}"', svg)
    updated = URL_REF_PATTERN.sub(lambda m: f"url(#{rename(m.group(1))})", updated)
    updated = HREF_REF_PATTERN.sub(lambda m: f'{m.group(1)}="#{rename(m.group(2))}"', updated)
    return updated


def _root_tag(svg: str) -> re.Match:
    match = ROOT_TAG_PATTERN.search(svg)
    if match is None:
        raise SvgCompositionError("Missing SVG root")
    return match


def _parse_dimension(tag: str, pattern: re.Pattern, attribute: str) -> int:
    match = pattern.search(tag)
    if match is None:
        raise SvgCompositionError(f"Missing {attribute} in SVG root")
    return int(match.group(1))


def parse_dimensions(svg: str) -> SvgDimensions:
    """Read the integer width and height declared on the root ``<svg>`` tag."""
    tag = _root_tag(svg).group(0)
    return SvgDimensions(
        width=_parse_dimension(tag, WIDTH_PATTERN, "width"),
        height=_parse_dimension(tag, HEIGHT_PATTERN, "height"),
    )


def inject_position(svg: str, x: int, y: int) -> str:
    """Insert ``x``/``y`` attributes right after the root tag name."""
    insert_at = _root_tag(svg).start() + len("<svg")
    return f'{svg[:insert_at]} x="{x}" y="{y}"{svg[insert_at:]}'


def combine_svgs(first: str, second: str, stacked: bool = False) -> str:
    """Place two rendered SVG documents side by side, or stacked vertically.

    Both inputs must already have unique ids; see ``uniquify_ids``.
    """
    first_dims = parse_dimensions(first)
    second_dims = parse_dimensions(second)

    if stacked:
        width = max(first_dims.width, second_dims.width)
        height = first_dims.height + second_dims.height
        second_x, second_y = 0, first_dims.height
    else:
        width = first_dims.width + second_dims.width
        height = max(first_dims.height, second_dims.height)
        second_x, second_y = first_dims.width, 0

    logger.debug("Combining badges into %dx%d canvas (stacked=%s)", width, height, stacked)

    return (
        f'<svg width="{width}" height="{height}" viewBox="0 0 {width} {height}" '
        f'xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}">'
        f"{inject_position(first, 0, 0)}"
        f"{inject_position(second, second_x, second_y)}"
        "</svg>"
    )
