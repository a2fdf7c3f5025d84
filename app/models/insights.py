"""
Insight report model

Derived entities recomputed for every request. ``to_dict`` produces the
camelCase shapes the dashboard client reads.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class RegionRollup:
    """Aggregated claim counts and rates for one region."""
    region_id: str
    region_name: str
    total_claims: int
    approved: int
    pending: int
    approval_rate: float
    pending_rate: float
    settlement_count: int
    district_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "regionId": self.region_id,
            "regionName": self.region_name,
            "totalClaims": self.total_claims,
            "approved": self.approved,
            "pending": self.pending,
            "approvalRate": self.approval_rate,
            "pendingRate": self.pending_rate,
            "settlementCount": self.settlement_count,
            "districtCount": self.district_count,
        }


@dataclass(frozen=True)
class ClaimsTotals:
    """Dataset-wide rollup."""
    total_claims: int = 0
    approved: int = 0
    pending: int = 0
    overall_approval_rate: float = 0.0
    region_count: int = 0
    settlement_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalClaims": self.total_claims,
            "approved": self.approved,
            "pending": self.pending,
            "overallApprovalRate": self.overall_approval_rate,
            "regionCount": self.region_count,
            "settlementCount": self.settlement_count,
        }


@dataclass(frozen=True)
class ClaimsRollup:
    """Per-region rollups (dataset order) plus global totals."""
    regions: Dict[str, RegionRollup] = field(default_factory=dict)
    totals: ClaimsTotals = field(default_factory=ClaimsTotals)


@dataclass(frozen=True)
class Alert:
    type: str  # danger | warning
    title: str
    message: str
    priority: str  # high | medium
    action: str  # view-details | take-action

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "priority": self.priority,
            "action": self.action,
        }


@dataclass(frozen=True)
class Insight:
    type: str  # success | warning | info | danger
    title: str
    message: str
    confidence: int
    impact: str  # High | Medium | Low
    timeline: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "confidence": self.confidence,
            "impact": self.impact,
            "timeline": self.timeline,
        }


@dataclass(frozen=True)
class ActionItem:
    icon: str
    title: str
    description: str
    priority: str  # High | Medium
    timeline: str
    color: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "icon": self.icon,
            "title": self.title,
            "description": self.description,
            "priority": self.priority,
            "timeline": self.timeline,
            "color": self.color,
        }


@dataclass(frozen=True)
class PerformanceTrends:
    monthly_approval: int
    processing_efficiency: int
    stakeholder_satisfaction: int
    compliance_score: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "monthlyApproval": self.monthly_approval,
            "processingEfficiency": self.processing_efficiency,
            "stakeholderSatisfaction": self.stakeholder_satisfaction,
            "complianceScore": self.compliance_score,
        }


@dataclass(frozen=True)
class InsightReport:
    """Everything the DSS dashboard renders in one payload."""
    ai_confidence: float
    critical_issues: int
    last_updated: str
    alerts: List[Alert]
    insights: List[Insight]
    action_items: List[ActionItem]
    performance_trends: PerformanceTrends
    state_analysis: Dict[str, RegionRollup]

    @property
    def recommendations(self) -> int:
        return len(self.action_items)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metrics": {
                "aiConfidence": self.ai_confidence,
                "criticalIssues": self.critical_issues,
                "recommendations": self.recommendations,
                "lastUpdated": self.last_updated,
            },
            "alerts": [a.to_dict() for a in self.alerts],
            "insights": [i.to_dict() for i in self.insights],
            "actionItems": [a.to_dict() for a in self.action_items],
            "performanceTrends": self.performance_trends.to_dict(),
            "stateAnalysis": {rid: r.to_dict() for rid, r in self.state_analysis.items()},
        }
