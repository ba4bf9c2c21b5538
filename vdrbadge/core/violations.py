from __future__ import annotations

from typing import Any

from vdrbadge.core.models import ViolationLevel

DIRECT_VIOLATION_FIELDS = (
    "policyViolation",
    "policyViolationLevel",
    "policyViolationSeverity",
    "policyViolationStatus",
    "policyViolationState",
    "policyViolationType",
)

POLICY_VIOLATION_KEYS = frozenset(
    "".join(ch for ch in field.lower() if ch.isalnum()) for field in DIRECT_VIOLATION_FIELDS
)

VIOLATION_LEVELS = {
    "fail": ViolationLevel.FAIL,
    "failed": ViolationLevel.FAIL,
    "failure": ViolationLevel.FAIL,
    "error": ViolationLevel.FAIL,
    "deny": ViolationLevel.FAIL,
    "denied": ViolationLevel.FAIL,
    "warn": ViolationLevel.WARN,
    "warning": ViolationLevel.WARN,
    "info": ViolationLevel.INFO,
    "informational": ViolationLevel.INFO,
}


def normalize_property_name(name: str) -> str:
    """Lowercase and drop everything that is not a letter or digit."""
    return "".join(ch for ch in name.lower() if ch.isalnum())


def is_policy_violation_property(name: Any) -> bool:
    if not isinstance(name, str):
        return False
    return normalize_property_name(name) in POLICY_VIOLATION_KEYS


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    # objects and arrays carry no usable level
    return ""


def _find_in_properties(properties: Any) -> str | None:
    if isinstance(properties, list):
        for prop in properties:
            if isinstance(prop, dict) and is_policy_violation_property(prop.get("name")):
                return _as_text(prop.get("value"))
    elif isinstance(properties, dict):
        for name, value in properties.items():
            if is_policy_violation_property(name):
                return _as_text(value)
    return None


def find_violation_indicator(vulnerability: Any) -> str | None:
    """Locate the raw policy violation value on a vulnerability entry.

    Direct ``policyViolation*`` fields are checked first, then the
    ``properties`` bag (a list of name/value pairs or a plain mapping).
    """
    if not isinstance(vulnerability, dict):
        return None

    for field in DIRECT_VIOLATION_FIELDS:
        value = vulnerability.get(field)
        if value is not None:
            return _as_text(value)

    return _find_in_properties(vulnerability.get("properties"))


def classify_violation_level(value: str | None) -> ViolationLevel:
    if value is None:
        return ViolationLevel.NONE
    return VIOLATION_LEVELS.get(value.strip().lower(), ViolationLevel.NONE)
