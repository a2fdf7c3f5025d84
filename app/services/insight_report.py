"""
Insight Report Service

Single-pass pipeline per request:

    snapshot → rollups → alerts / insights / action items / trends → report

Nothing is cached between calls; the repository snapshot is the only shared
state and it is immutable.
"""
import random
from typing import Dict, Optional

from app.exceptions import RegionNotFoundError
from app.models.insights import InsightReport, RegionRollup
from app.services.action_items import generate_action_items
from app.services.aggregation import aggregate, status_breakdown
from app.services.alert_rules import generate_alerts
from app.services.claims_repository import ClaimsRepository
from app.services.insight_generator import generate_insights, rank_regions
from app.services.trend_estimator import TrendEstimator, ai_confidence
from app.utils.helpers import utc_now_iso
from app.utils.logger import log


class InsightReportService:
    """
    Builds insight reports and state analyses from a claims repository.

    ``rng`` feeds the simulated parts of the report (trend jitter and the
    boundary-review estimate); pass a seeded ``random.Random`` for
    reproducible output.
    """

    def __init__(self, repository: ClaimsRepository, rng: Optional[random.Random] = None):
        self.repository = repository
        self.rng = rng or random.Random()
        self.trends = TrendEstimator(self.rng)

    def build_report(self) -> InsightReport:
        """Compute a fresh insight report from the current snapshot."""
        snapshot = self.repository.snapshot()
        rollup = aggregate(snapshot)

        alert_result = generate_alerts(rollup)
        ranking = rank_regions(rollup)
        insights = generate_insights(rollup, self.rng, ranking)
        action_items = generate_action_items(ranking.best)
        trends = self.trends.estimate(rollup.totals)

        report = InsightReport(
            ai_confidence=ai_confidence(rollup.totals.overall_approval_rate),
            critical_issues=alert_result.critical_issues,
            last_updated=utc_now_iso(),
            alerts=alert_result.alerts,
            insights=insights,
            action_items=action_items,
            performance_trends=trends,
            state_analysis=rollup.regions,
        )
        log.debug(
            f"Insight report built: {len(rollup.regions)} states, "
            f"{len(report.alerts)} alerts, {report.critical_issues} critical"
        )
        return report

    def state_analysis(self) -> Dict[str, RegionRollup]:
        return aggregate(self.repository.snapshot()).regions

    def region_analysis(self, region_id: str) -> RegionRollup:
        regions = self.state_analysis()
        if region_id not in regions:
            raise RegionNotFoundError(region_id)
        return regions[region_id]

    def overview(self) -> Dict:
        """Dataset-wide totals with settlement counts by status."""
        snapshot = self.repository.snapshot()
        rollup = aggregate(snapshot)
        return {
            **rollup.totals.to_dict(),
            "settlementStatus": status_breakdown(snapshot),
            "loadedAt": snapshot.loaded_at,
        }
