"""
Alert Generator

Threshold rules over each region's pending-claim share:

    pending_rate > 40%        → danger  / high   / view-details  (critical issue)
    25% < pending_rate <= 40% → warning / medium / take-action
    otherwise                 → no alert

Alerts follow region order; regions with no claims never alert.
"""
from dataclasses import dataclass, field
from typing import List

from app.models.insights import Alert, ClaimsRollup, RegionRollup

DANGER_PENDING_RATE = 40.0
WARNING_PENDING_RATE = 25.0


@dataclass
class AlertResult:
    alerts: List[Alert] = field(default_factory=list)
    critical_issues: int = 0


def alert_for_region(rollup: RegionRollup):
    """Return the alert a region triggers, or None."""
    if rollup.total_claims == 0:
        return None

    if rollup.pending_rate > DANGER_PENDING_RATE:
        return Alert(
            type="danger",
            title=f"High Priority: {rollup.region_name} Backlog",
            message=(
                f"{rollup.pending_rate}% of claims in {rollup.region_name} are pending "
                f"({rollup.pending:,} of {rollup.total_claims:,}). Immediate review recommended."
            ),
            priority="high",
            action="view-details",
        )

    if rollup.pending_rate > WARNING_PENDING_RATE:
        return Alert(
            type="warning",
            title=f"Processing Delay: {rollup.region_name}",
            message=(
                f"{rollup.pending_rate}% pending rate in {rollup.region_name} is above the "
                f"{WARNING_PENDING_RATE:.0f}% target. Consider reallocating review capacity."
            ),
            priority="medium",
            action="take-action",
        )

    return None


def generate_alerts(rollup: ClaimsRollup) -> AlertResult:
    """Apply the pending-rate thresholds to every region."""
    result = AlertResult()
    for region in rollup.regions.values():
        alert = alert_for_region(region)
        if alert is None:
            continue
        result.alerts.append(alert)
        if alert.type == "danger":
            result.critical_issues += 1
    return result
