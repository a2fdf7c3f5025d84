"""
Trend Estimator

aiConfidence and monthlyApproval are derived from the overall approval rate.
The other three trend scores are simulated: a fixed base plus jitter from
an injected ``random.Random``, so a seeded source gives reproducible output.
"""
import math
import random
from typing import Optional

from app.models.insights import ClaimsTotals, PerformanceTrends
from app.utils.helpers import clamp

CONFIDENCE_BASE = 75.0
CONFIDENCE_PIVOT = 50.0
CONFIDENCE_SLOPE = 0.5
CONFIDENCE_FLOOR = 0.0
CONFIDENCE_CEILING = 95.0

JITTER_SPREAD = 10
PROCESSING_EFFICIENCY_BASE = 78
STAKEHOLDER_SATISFACTION_BASE = 85
COMPLIANCE_SCORE_BASE = 88


def ai_confidence(overall_approval_rate: float) -> float:
    raw = CONFIDENCE_BASE + (overall_approval_rate - CONFIDENCE_PIVOT) * CONFIDENCE_SLOPE
    return round(clamp(raw, CONFIDENCE_FLOOR, CONFIDENCE_CEILING), 1)


class TrendEstimator:
    """Derives the performance-trend block of the insight report."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def _jitter(self) -> int:
        return self.rng.randrange(JITTER_SPREAD)

    def estimate(self, totals: ClaimsTotals) -> PerformanceTrends:
        return PerformanceTrends(
            monthly_approval=math.floor(totals.overall_approval_rate),
            processing_efficiency=PROCESSING_EFFICIENCY_BASE + self._jitter(),
            stakeholder_satisfaction=STAKEHOLDER_SATISFACTION_BASE + self._jitter(),
            compliance_score=COMPLIANCE_SCORE_BASE + self._jitter(),
        )
