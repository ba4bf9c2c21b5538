from __future__ import annotations

from typing import Any
from urllib.parse import quote


def _component_value(vdr: Any, field: str) -> str | None:
    if not isinstance(vdr, dict):
        return None
    metadata = vdr.get("metadata")
    if not isinstance(metadata, dict):
        return None
    component = metadata.get("component")
    if not isinstance(component, dict):
        return None
    value = component.get(field)
    if value is None or isinstance(value, (dict, list)):
        return None
    text = str(value)
    if not text.strip():
        return None
    return text


def resolve_href(vdr: Any, explicit_href: str | None, base_url: str | None) -> str | None:
    """Pick the URL a badge links to.

    An explicit href always wins. Otherwise the link is built from the base
    URL and the VDR's ``metadata.component`` name and version, e.g.
    ``https://dt.example.com/app/1.0.0``.
    """
    if explicit_href and explicit_href.strip():
        return explicit_href

    base = (base_url or "").strip()
    if not base:
        return None

    name = _component_value(vdr, "name")
    version = _component_value(vdr, "version")
    if name is None or version is None:
        return None

    return f"{base.rstrip('/')}/{quote(name, safe='')}/{quote(version, safe='')}"
