from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from vdrbadge import __version__
from vdrbadge.badges.renderer import BadgeRenderer
from vdrbadge.core import metrics as metrics_mod
from vdrbadge.core.links import resolve_href
from vdrbadge.core.utils import (
    DEFAULT_ROUNDED_PIXELS,
    BadgeError,
    InvalidVdrError,
    get_base_url,
    parse_vdr,
    setup_logging,
)

SVG_MEDIA_TYPE = "image/svg+xml"

setup_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="VDR Badge API", version=__version__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

renderer = BadgeRenderer()


async def _read_vdr(request: Request):
    try:
        return parse_vdr(await request.body())
    except InvalidVdrError as exc:
        raise HTTPException(status_code=400, detail="Invalid VDR payload") from exc


def _svg_response(render, *args, **kwargs) -> Response:
    try:
        svg = render(*args, **kwargs)
    except BadgeError as exc:
        logger.error("Badge rendering failed: %s", exc)
        raise HTTPException(status_code=500, detail=f"Badge rendering failed: {exc}")
    return Response(content=svg, media_type=SVG_MEDIA_TYPE)


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.post("/v1/badge/vdr")
async def render_badge(
    request: Request,
    href: Optional[str] = Query(None, description="Optional URL to link the badge to."),
    rounded_pixels: int = Query(DEFAULT_ROUNDED_PIXELS, alias="roundedPixels", description="Corner radius in pixels."),
):
    vdr = await _read_vdr(request)
    metrics = metrics_mod.summarize_vulnerabilities(vdr)
    resolved_href = resolve_href(vdr, href, get_base_url())
    return _svg_response(renderer.render_vulnerabilities, metrics, resolved_href, rounded_pixels)


@app.post("/v1/badge/vdr/violations")
async def render_policy_violations(
    request: Request,
    href: Optional[str] = Query(None, description="Optional URL to link the badge to."),
    rounded_pixels: int = Query(DEFAULT_ROUNDED_PIXELS, alias="roundedPixels", description="Corner radius in pixels."),
):
    vdr = await _read_vdr(request)
    metrics = metrics_mod.summarize_violations(vdr)
    resolved_href = resolve_href(vdr, href, get_base_url())
    return _svg_response(renderer.render_violations, metrics, resolved_href, rounded_pixels)


@app.post("/v1/badge/vdr/combined")
async def render_combined_badge(
    request: Request,
    href: Optional[str] = Query(None, description="Optional URL to link the badge to."),
    rounded_pixels: int = Query(DEFAULT_ROUNDED_PIXELS, alias="roundedPixels", description="Corner radius in pixels."),
    stacked: bool = Query(False, description="Stack badges vertically when true."),
):
    vdr = await _read_vdr(request)
    vulnerability_metrics = metrics_mod.summarize_vulnerabilities(vdr)
    violation_metrics = metrics_mod.summarize_violations(vdr)
    resolved_href = resolve_href(vdr, href, get_base_url())
    return _svg_response(
        renderer.render_combined,
        vulnerability_metrics,
        violation_metrics,
        resolved_href,
        rounded_pixels,
        stacked=stacked,
    )
