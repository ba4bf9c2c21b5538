from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Severity(int, Enum):
    UNASSIGNED = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    def is_more_severe_than(self, other: "Severity") -> bool:
        return self.value > other.value


class ViolationLevel(str, Enum):
    NONE = "none"
    INFO = "info"
    WARN = "warn"
    FAIL = "fail"


class VulnerabilityMetrics(BaseModel):
    """Vulnerability counts by severity.

    ``available`` is False when the document carried no vulnerability list at
    all; an available summary with a zero total means "no vulnerabilities".
    """

    model_config = ConfigDict(frozen=True)

    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0
    unassigned: int = 0
    available: bool = False

    @classmethod
    def no_metrics(cls) -> "VulnerabilityMetrics":
        return cls()

    @classmethod
    def with_counts(cls, critical: int, high: int, medium: int, low: int, unassigned: int) -> "VulnerabilityMetrics":
        return cls(
            critical=critical,
            high=high,
            medium=medium,
            low=low,
            unassigned=unassigned,
            available=True,
        )

    @property
    def total(self) -> int:
        return self.critical + self.high + self.medium + self.low + self.unassigned


class ViolationMetrics(BaseModel):
    """Policy violation counts by level.

    ``available`` is False when no vulnerability carried a policy violation
    indicator, regardless of how many vulnerabilities there were.
    """

    model_config = ConfigDict(frozen=True)

    fail: int = 0
    warn: int = 0
    info: int = 0
    available: bool = False

    @classmethod
    def no_metrics(cls) -> "ViolationMetrics":
        return cls()

    @classmethod
    def with_counts(cls, fail: int, warn: int, info: int) -> "ViolationMetrics":
        return cls(fail=fail, warn=warn, info=info, available=True)

    @property
    def total(self) -> int:
        return self.fail + self.warn + self.info


class SvgDimensions(BaseModel):
    width: int
    height: int
