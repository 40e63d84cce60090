"""Compliance Engine: blockchain address screening."""

from circle_w3s.compliance.client import ComplianceClient
from circle_w3s.compliance.models import (
    AddressScreening,
    Chain,
    RiskAction,
    RiskCategory,
    RiskScore,
    RiskType,
    ScreenAddressRequest,
    ScreenAddressResponse,
    ScreeningResult,
)

__all__ = [
    "AddressScreening",
    "Chain",
    "ComplianceClient",
    "RiskAction",
    "RiskCategory",
    "RiskScore",
    "RiskType",
    "ScreenAddressRequest",
    "ScreenAddressResponse",
    "ScreeningResult",
]
