"""Data models for FRA Atlas DSS"""

from app.models.claims import ClaimsSnapshot, Region, Settlement, SETTLEMENT_STATUSES

from app.models.insights import (
    ActionItem,
    Alert,
    ClaimsRollup,
    ClaimsTotals,
    Insight,
    InsightReport,
    PerformanceTrends,
    RegionRollup,
)

__all__ = [
    "ClaimsSnapshot",
    "Region",
    "Settlement",
    "SETTLEMENT_STATUSES",
    "ActionItem",
    "Alert",
    "ClaimsRollup",
    "ClaimsTotals",
    "Insight",
    "InsightReport",
    "PerformanceTrends",
    "RegionRollup",
]
