"""
Aggregation Engine

Rolls settlement claim counts up to region level and across the dataset.
Rates are percentages rounded to one decimal and are 0.0 when a region has
no claims.
"""
from typing import Dict

from app.models.claims import ClaimsSnapshot, Region
from app.models.insights import ClaimsRollup, ClaimsTotals, RegionRollup
from app.utils.helpers import percentage


def rollup_region(region: Region) -> RegionRollup:
    """Sum one region's settlements into a RegionRollup."""
    approved = sum(s.claims_approved for s in region.settlements)
    pending = sum(s.claims_pending for s in region.settlements)
    total = approved + pending

    return RegionRollup(
        region_id=region.id,
        region_name=region.name,
        total_claims=total,
        approved=approved,
        pending=pending,
        approval_rate=percentage(approved, total),
        pending_rate=percentage(pending, total),
        settlement_count=len(region.settlements),
        district_count=len(region.districts),
    )


def aggregate(snapshot: ClaimsSnapshot) -> ClaimsRollup:
    """Compute per-region rollups (dataset order) and global totals."""
    regions: Dict[str, RegionRollup] = {}
    for region in snapshot.regions:
        regions[region.id] = rollup_region(region)

    approved = sum(r.approved for r in regions.values())
    pending = sum(r.pending for r in regions.values())
    total = sum(r.total_claims for r in regions.values())

    totals = ClaimsTotals(
        total_claims=total,
        approved=approved,
        pending=pending,
        overall_approval_rate=percentage(approved, total),
        region_count=len(regions),
        settlement_count=sum(r.settlement_count for r in regions.values()),
    )
    return ClaimsRollup(regions=regions, totals=totals)


def status_breakdown(snapshot: ClaimsSnapshot) -> Dict[str, int]:
    """Count settlements by status across the dataset."""
    counts = {"approved": 0, "pending": 0, "rejected": 0}
    for region in snapshot.regions:
        for settlement in region.settlements:
            counts[settlement.status] += 1
    return counts
