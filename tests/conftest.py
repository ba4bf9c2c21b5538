import pytest


def _vdr_with_counts(critical=0, high=0, medium=0, low=0, unassigned=0):
    vulnerabilities = []
    for severity, count in (
        ("critical", critical),
        ("high", high),
        ("medium", medium),
        ("low", low),
        ("unknown", unassigned),
    ):
        vulnerabilities.extend({"ratings": [{"severity": severity}]} for _ in range(count))
    return {"vulnerabilities": vulnerabilities}


def _vdr_with_policy_counts(fail=0, warn=0, info=0, none=0):
    vulnerabilities = []
    for level, count in (("fail", fail), ("warn", warn), ("info", info), ("none", none)):
        vulnerabilities.extend(
            {"properties": [{"name": "policyViolation", "value": level}]} for _ in range(count)
        )
    return {"vulnerabilities": vulnerabilities}


@pytest.fixture
def vdr_with_counts():
    return _vdr_with_counts


@pytest.fixture
def vdr_with_policy_counts():
    return _vdr_with_policy_counts


@pytest.fixture
def combined_vdr():
    return {
        "vulnerabilities": [
            {
                "ratings": [{"severity": "critical"}],
                "properties": [{"name": "policyViolation", "value": "fail"}],
            },
            {
                "ratings": [{"severity": "low"}],
                "properties": [{"name": "policyViolation", "value": "info"}],
            },
        ]
    }


class FixedSizeTemplates:
    """Template service stub returning the same SVG shape for every template."""

    def __init__(self, width=76, height=20):
        self.width = width
        self.height = height
        self.calls = []

    def render(self, template_id, variables):
        self.calls.append((template_id, dict(variables)))
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
            f'width="{self.width}" height="{self.height}">'
            '<linearGradient id="smooth" x2="0" y2="100%"><stop offset="0"/></linearGradient>'
            f'<clipPath id="round"><rect width="{self.width}" height="{self.height}" rx="3"/></clipPath>'
            '<g clip-path="url(#round)"><rect fill="url(#smooth)"/></g>'
            '<use xlink:href="#round"/><use href="#smooth"/>'
            f"<text>{template_id}</text>"
            "</svg>"
        )


@pytest.fixture
def fixed_templates():
    return FixedSizeTemplates()
