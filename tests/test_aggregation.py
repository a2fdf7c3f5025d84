"""
Aggregation engine tests.

Covers:
  - Per-region sums and one-decimal rates
  - Zero-claim regions (rates are 0.0, never NaN)
  - Dataset-order preservation
  - Global totals and overall approval rate
  - Empty dataset
"""
import math

from app.services.aggregation import aggregate, rollup_region, status_breakdown

from conftest import SAMPLE_STATES, state, village


# ────────────────────────────────────────────
# REGION ROLLUPS
# ────────────────────────────────────────────


class TestRegionRollup:

    def test_sums_settlement_counts(self, make_snapshot):
        snap = make_snapshot(state("a", [village("v1", 30, 10), village("v2", 25, 35)]))
        r = rollup_region(snap.regions[0])
        assert r.approved == 55
        assert r.pending == 45
        assert r.total_claims == 100
        assert r.approval_rate == 55.0
        assert r.pending_rate == 45.0

    def test_rates_rounded_to_one_decimal(self, make_snapshot):
        snap = make_snapshot(state("a", [village("v1", 1, 2)]))
        r = rollup_region(snap.regions[0])
        assert r.approval_rate == 33.3
        assert r.pending_rate == 66.7

    def test_zero_claims_gives_zero_rates(self, make_snapshot):
        snap = make_snapshot(state("empty", [village("v1", 0, 0)]))
        r = rollup_region(snap.regions[0])
        assert r.total_claims == 0
        assert r.approval_rate == 0.0
        assert r.pending_rate == 0.0
        assert not math.isnan(r.approval_rate)

    def test_region_without_settlements(self, make_snapshot):
        snap = make_snapshot(state("bare", []))
        r = rollup_region(snap.regions[0])
        assert r.total_claims == 0
        assert r.settlement_count == 0
        assert r.pending_rate == 0.0

    def test_settlement_and_district_counts(self, make_snapshot):
        snap = make_snapshot(state("a", [village("v1", 1, 1), village("v2", 1, 1)], districts=("X", "Y", "Z")))
        r = rollup_region(snap.regions[0])
        assert r.settlement_count == 2
        assert r.district_count == 3

    def test_filed_count_does_not_change_total(self, make_snapshot):
        """Total claims is approved + pending; filed is not reconciled."""
        snap = make_snapshot(state("a", [village("v1", 10, 5, filed=40)]))
        r = rollup_region(snap.regions[0])
        assert r.total_claims == 15


# ────────────────────────────────────────────
# DATASET ROLLUP
# ────────────────────────────────────────────


class TestAggregate:

    def test_invariants_hold_for_all_regions(self, make_snapshot):
        rollup = aggregate(make_snapshot(*SAMPLE_STATES, state("zero", [village("z", 0, 0)])))
        for r in rollup.regions.values():
            assert r.total_claims == r.approved + r.pending
            assert 0.0 <= r.approval_rate <= 100.0
            assert 0.0 <= r.pending_rate <= 100.0

    def test_preserves_dataset_order(self, make_snapshot):
        rollup = aggregate(make_snapshot(*SAMPLE_STATES))
        assert list(rollup.regions) == ["madhya-pradesh", "tripura", "odisha", "telangana"]

    def test_sample_region_rates(self, make_snapshot):
        rollup = aggregate(make_snapshot(*SAMPLE_STATES))
        mp = rollup.regions["madhya-pradesh"]
        assert (mp.approved, mp.pending, mp.total_claims) == (74, 63, 137)
        assert mp.approval_rate == 54.0
        assert mp.pending_rate == 46.0

    def test_global_totals(self, make_snapshot):
        totals = aggregate(make_snapshot(*SAMPLE_STATES)).totals
        assert totals.approved == 310
        assert totals.pending == 129
        assert totals.total_claims == 439
        assert totals.overall_approval_rate == 70.6
        assert totals.region_count == 4
        assert totals.settlement_count == 10

    def test_empty_dataset(self, make_snapshot):
        rollup = aggregate(make_snapshot())
        assert rollup.regions == {}
        assert rollup.totals.total_claims == 0
        assert rollup.totals.overall_approval_rate == 0.0


class TestStatusBreakdown:

    def test_counts_settlements_by_status(self, make_snapshot):
        counts = status_breakdown(make_snapshot(*SAMPLE_STATES))
        assert counts == {"approved": 7, "pending": 2, "rejected": 1}
