"""VDR badge rendering: severity and policy-violation badges from CycloneDX VDRs."""

__version__ = "0.1.0"
