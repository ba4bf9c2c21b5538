"""Badge rendering and SVG composition."""

from .renderer import BadgeRenderer, TemplateService
from .svg import combine_svgs, inject_position, parse_dimensions, uniquify_ids

__all__ = [
    "BadgeRenderer",
    "TemplateService",
    "combine_svgs",
    "inject_position",
    "parse_dimensions",
    "uniquify_ids",
]
