"""Payload models for the Compliance Engine address screening API."""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import Field

from circle_w3s.models import RequestModel, WireModel


class Chain(str, enum.Enum):
    """Chains accepted by address screening."""

    ETH = "ETH"
    ETH_SEPOLIA = "ETH-SEPOLIA"
    AVAX = "AVAX"
    AVAX_FUJI = "AVAX-FUJI"
    MATIC = "MATIC"
    MATIC_AMOY = "MATIC-AMOY"
    ALGO = "ALGO"
    ATOM = "ATOM"
    ARB = "ARB"
    ARB_SEPOLIA = "ARB-SEPOLIA"
    HBAR = "HBAR"
    SOL = "SOL"
    SOL_DEVNET = "SOL-DEVNET"
    UNI = "UNI"
    UNI_SEPOLIA = "UNI-SEPOLIA"
    TRX = "TRX"
    XLM = "XLM"
    BCH = "BCH"
    BTC = "BTC"
    BSV = "BSV"
    ETC = "ETC"
    LTC = "LTC"
    XMR = "XMR"
    XRP = "XRP"
    ZRX = "ZRX"
    OP = "OP"
    DOT = "DOT"


class ScreeningResult(str, enum.Enum):
    APPROVED = "APPROVED"
    DENIED = "DENIED"


class RiskAction(str, enum.Enum):
    APPROVE = "APPROVE"
    REVIEW = "REVIEW"
    FREEZE_WALLET = "FREEZE_WALLET"
    DENY = "DENY"


class RiskScore(str, enum.Enum):
    UNKNOWN = "UNKNOWN"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    SEVERE = "SEVERE"
    BLOCKLIST = "BLOCKLIST"


class RiskCategory(str, enum.Enum):
    SANCTIONS = "SANCTIONS"
    CSAM = "CSAM"
    ILLICIT_BEHAVIOR = "ILLICIT_BEHAVIOR"
    GAMBLING = "GAMBLING"
    TERRORIST_FINANCING = "TERRORIST_FINANCING"
    UNSUPPORTED = "UNSUPPORTED"
    FROZEN = "FROZEN"
    OTHER = "OTHER"
    HIGH_RISK_INDUSTRY = "HIGH_RISK_INDUSTRY"
    PEP = "PEP"
    TRUSTED = "TRUSTED"
    HACKING = "HACKING"
    HUMAN_TRAFFICKING = "HUMAN_TRAFFICKING"
    SPECIAL_MEASURES = "SPECIAL_MEASURES"


class RiskType(str, enum.Enum):
    OWNERSHIP = "OWNERSHIP"
    COUNTERPARTY = "COUNTERPARTY"
    INDIRECT = "INDIRECT"


class ScreenAddressRequest(RequestModel):
    """Body of ``POST /v1/w3s/compliance/screening/addresses``.

    ``idempotency_key`` is caller input: set it to make a resubmitted
    screening take effect at most once. Left unset, a fresh key is
    generated for each call.
    """

    address: str
    chain: Chain
    idempotency_key: Optional[str] = None


class SignalSource(WireModel):
    row_id: str
    pointer: str


class RiskSignal(WireModel):
    source: str
    source_value: str
    risk_score: RiskScore
    risk_categories: list[RiskCategory]
    type: RiskType
    signal_source: Optional[SignalSource] = None


class AddressScreeningDecision(WireModel):
    screening_date: str
    rule_name: Optional[str] = None
    actions: Optional[list[RiskAction]] = None
    reasons: Optional[list[RiskSignal]] = None


class ScreeningVendorDetail(WireModel):
    id: str
    vendor: str
    response: Any = Field(description="Vendor response, passed through verbatim")
    create_date: str


class AddressScreening(WireModel):
    """Outcome of screening one blockchain address."""

    result: ScreeningResult
    decision: AddressScreeningDecision
    id: str
    address: str
    chain: Chain
    details: list[ScreeningVendorDetail]
    alert_id: Optional[str] = None


class ScreenAddressResponse(WireModel):
    data: AddressScreening
