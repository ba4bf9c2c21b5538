from __future__ import annotations

from typing import Any

from vdrbadge.core.models import Severity

SEVERITY_NAMES = {
    "critical": Severity.CRITICAL,
    "high": Severity.HIGH,
    "medium": Severity.MEDIUM,
    "moderate": Severity.MEDIUM,
    "low": Severity.LOW,
    "info": Severity.UNASSIGNED,
    "informational": Severity.UNASSIGNED,
    "none": Severity.UNASSIGNED,
    "unknown": Severity.UNASSIGNED,
    "unassigned": Severity.UNASSIGNED,
    "": Severity.UNASSIGNED,
}


def severity_from_string(value: Any) -> Severity:
    """Map a textual severity to ``Severity``; unknown values are UNASSIGNED."""
    if not isinstance(value, str):
        return Severity.UNASSIGNED
    return SEVERITY_NAMES.get(value.strip().lower(), Severity.UNASSIGNED)


def _severity_from_rating(rating: Any) -> Severity:
    if isinstance(rating, str):
        return severity_from_string(rating)
    if isinstance(rating, dict):
        return severity_from_string(rating.get("severity"))
    return Severity.UNASSIGNED


def classify_severity(vulnerability: Any) -> Severity:
    """Resolve the severity of one VDR vulnerability entry.

    The most severe of the entry's ratings wins. Entries without ratings
    fall back to a top-level ``severity`` field.
    """
    if not isinstance(vulnerability, dict):
        return Severity.UNASSIGNED

    ratings = vulnerability.get("ratings")
    if isinstance(ratings, list) and ratings:
        highest = Severity.UNASSIGNED
        for rating in ratings:
            severity = _severity_from_rating(rating)
            if severity.is_more_severe_than(highest):
                highest = severity
        return highest

    return severity_from_string(vulnerability.get("severity"))
