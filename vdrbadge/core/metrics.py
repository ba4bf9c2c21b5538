"""Vulnerability and policy violation summaries for CycloneDX VDR documents.

Both summaries share the same gating: a document that is not a JSON object,
or whose ``vulnerabilities`` field is missing or not a list, has no metrics.
Malformed entries never fail a summary; they fall back to UNASSIGNED or are
skipped.
"""

from __future__ import annotations

import logging
from typing import Any

from vdrbadge.core.models import Severity, ViolationLevel, ViolationMetrics, VulnerabilityMetrics
from vdrbadge.core.severity import classify_severity
from vdrbadge.core.violations import classify_violation_level, find_violation_indicator

logger = logging.getLogger(__name__)


def _vulnerability_list(vdr: Any) -> list | None:
    if not isinstance(vdr, dict):
        return None
    vulnerabilities = vdr.get("vulnerabilities")
    if not isinstance(vulnerabilities, list):
        return None
    return vulnerabilities


def summarize_vulnerabilities(vdr: Any) -> VulnerabilityMetrics:
    """Count vulnerabilities by their most severe rating."""
    vulnerabilities = _vulnerability_list(vdr)
    if vulnerabilities is None:
        logger.debug("No vulnerabilities array in VDR, no metrics available")
        return VulnerabilityMetrics.no_metrics()

    counts = {severity: 0 for severity in Severity}
    for vulnerability in vulnerabilities:
        counts[classify_severity(vulnerability)] += 1

    return VulnerabilityMetrics.with_counts(
        critical=counts[Severity.CRITICAL],
        high=counts[Severity.HIGH],
        medium=counts[Severity.MEDIUM],
        low=counts[Severity.LOW],
        unassigned=counts[Severity.UNASSIGNED],
    )


def summarize_violations(vdr: Any) -> ViolationMetrics:
    """Count policy violations by level.

    The summary is available as soon as one entry carries a violation
    indicator, even one whose value maps to NONE.
    """
    vulnerabilities = _vulnerability_list(vdr)
    if vulnerabilities is None:
        logger.debug("No vulnerabilities array in VDR, no violation metrics available")
        return ViolationMetrics.no_metrics()

    counts = {level: 0 for level in ViolationLevel}
    saw_violation = False
    for vulnerability in vulnerabilities:
        indicator = find_violation_indicator(vulnerability)
        if indicator is None:
            continue
        saw_violation = True
        counts[classify_violation_level(indicator)] += 1

    if not saw_violation:
        logger.debug("No policy violation indicator on %d vulnerabilities", len(vulnerabilities))
        return ViolationMetrics.no_metrics()

    return ViolationMetrics.with_counts(
        fail=counts[ViolationLevel.FAIL],
        warn=counts[ViolationLevel.WARN],
        info=counts[ViolationLevel.INFO],
    )
