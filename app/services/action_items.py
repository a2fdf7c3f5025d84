"""
Action-Item Generator

Four fixed remediation recommendations; only the digital-system rollout
references data (the best performing state).
"""
from typing import List, Optional

from app.models.insights import ActionItem, RegionRollup


def generate_action_items(best: Optional[RegionRollup]) -> List[ActionItem]:
    if best is not None:
        rollout = (
            f"Roll out the digital claims system used in {best.region_name} "
            f"to the remaining states."
        )
    else:
        rollout = "Roll out a digital claims tracking system across all states."

    return [
        ActionItem(
            icon="users",
            title="Expand Processing Teams",
            description="Deploy additional verification officers to states with the largest pending backlog.",
            priority="High",
            timeline="2 weeks",
            color="danger",
        ),
        ActionItem(
            icon="laptop",
            title="Digital System Rollout",
            description=rollout,
            priority="High",
            timeline="3 months",
            color="primary",
        ),
        ActionItem(
            icon="map-marked-alt",
            title="Boundary Survey",
            description="Commission GPS boundary surveys for villages adjoining protected areas.",
            priority="Medium",
            timeline="6 weeks",
            color="warning",
        ),
        ActionItem(
            icon="file-alt",
            title="Appeal Documentation",
            description="Prepare standard documentation packs to support appeals for rejected claims.",
            priority="Medium",
            timeline="1 month",
            color="info",
        ),
    ]
