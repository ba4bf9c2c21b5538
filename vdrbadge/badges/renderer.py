"""SVG badge rendering backed by Jinja2 templates.

Template selection per badge kind:

* metrics unavailable -> ``*-nometrics``
* available, zero total -> ``*-none``
* available, non-zero -> the counts template
"""

from __future__ import annotations

import logging
from typing import Dict, Mapping, Optional

from jinja2 import Environment, PackageLoader, StrictUndefined, TemplateError, select_autoescape

from vdrbadge.badges.svg import combine_svgs, uniquify_ids
from vdrbadge.core.models import ViolationMetrics, VulnerabilityMetrics
from vdrbadge.core.utils import DEFAULT_ROUNDED_PIXELS, BadgeRenderError

logger = logging.getLogger(__name__)

VULNS_TEMPLATE = "project-vulns"
VULNS_NONE_TEMPLATE = "project-vulns-none"
VULNS_NO_METRICS_TEMPLATE = "project-vulns-nometrics"
VIOLATIONS_TEMPLATE = "project-violations"
VIOLATIONS_NONE_TEMPLATE = "project-violations-none"
VIOLATIONS_NO_METRICS_TEMPLATE = "project-violations-nometrics"

VULN_ID_PREFIX = "vuln-"
POLICY_ID_PREFIX = "policy-"


class TemplateService:
    """Renders a named SVG template with string variables."""

    def __init__(self, environment: Environment | None = None):
        self.environment = environment or Environment(
            loader=PackageLoader("vdrbadge.badges", "templates"),
            autoescape=select_autoescape(enabled_extensions=("svg",), default_for_string=True),
            undefined=StrictUndefined,
        )

    def render(self, template_id: str, variables: Mapping[str, str]) -> str:
        try:
            template = self.environment.get_template(f"{template_id}.svg")
            return template.render(**variables)
        except TemplateError as exc:
            logger.error("Failed to render SVG badge %s: %s", template_id, exc)
            raise BadgeRenderError(f"Failed to render SVG badge {template_id}") from exc


class BadgeRenderer:
    def __init__(self, templates: TemplateService | None = None):
        self.templates = templates or TemplateService()

    def _base_context(self, href: Optional[str], rounded_pixels: int) -> Dict[str, str]:
        context = {"roundedPixels": str(rounded_pixels)}
        if href and href.strip():
            context["href"] = href
        return context

    def _render(self, template_id: str, context: Dict[str, str]) -> str:
        logger.debug("Rendering badge template %s", template_id)
        return self.templates.render(template_id, context)

    def render_vulnerabilities(
        self,
        metrics: VulnerabilityMetrics | None,
        href: Optional[str] = None,
        rounded_pixels: int = DEFAULT_ROUNDED_PIXELS,
    ) -> str:
        context = self._base_context(href, rounded_pixels)

        if metrics is None or not metrics.available:
            return self._render(VULNS_NO_METRICS_TEMPLATE, context)

        if metrics.total > 0:
            context.update(
                critical=str(metrics.critical),
                high=str(metrics.high),
                medium=str(metrics.medium),
                low=str(metrics.low),
                unassigned=str(metrics.unassigned),
            )
            return self._render(VULNS_TEMPLATE, context)

        return self._render(VULNS_NONE_TEMPLATE, context)

    def render_violations(
        self,
        metrics: ViolationMetrics | None,
        href: Optional[str] = None,
        rounded_pixels: int = DEFAULT_ROUNDED_PIXELS,
    ) -> str:
        context = self._base_context(href, rounded_pixels)

        if metrics is None or not metrics.available:
            return self._render(VIOLATIONS_NO_METRICS_TEMPLATE, context)

        if metrics.total > 0:
            context.update(
                fail=str(metrics.fail),
                warn=str(metrics.warn),
                info=str(metrics.info),
            )
            return self._render(VIOLATIONS_TEMPLATE, context)

        return self._render(VIOLATIONS_NONE_TEMPLATE, context)

    def render_combined(
        self,
        vulnerability_metrics: VulnerabilityMetrics | None,
        violation_metrics: ViolationMetrics | None,
        href: Optional[str] = None,
        rounded_pixels: int = DEFAULT_ROUNDED_PIXELS,
        stacked: bool = False,
    ) -> str:
        """Render both badges and merge them into a single SVG document."""
        vuln_svg = self.render_vulnerabilities(vulnerability_metrics, href, rounded_pixels)
        violation_svg = self.render_violations(violation_metrics, href, rounded_pixels)

        return combine_svgs(
            uniquify_ids(vuln_svg, VULN_ID_PREFIX),
            uniquify_ids(violation_svg, POLICY_ID_PREFIX),
            stacked=stacked,
        )
