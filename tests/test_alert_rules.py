"""
Alert threshold tests.

Guards against:
1. Off-by-one at the 25% / 40% boundaries
2. Zero-claim regions raising alerts
3. Critical-issue count drifting from the number of danger alerts
4. Alerts being re-sorted away from region order
"""
from app.services.aggregation import aggregate
from app.services.alert_rules import generate_alerts

from conftest import SAMPLE_STATES, state, village


def _alerts_for(make_snapshot, *states):
    return generate_alerts(aggregate(make_snapshot(*states)))


def test_single_region_over_40_percent_is_one_danger_alert(make_snapshot):
    result = _alerts_for(make_snapshot, state("r", [village("v", 55, 45, filed=100)], name="Region R"))
    assert len(result.alerts) == 1
    alert = result.alerts[0]
    assert alert.type == "danger"
    assert alert.priority == "high"
    assert alert.action == "view-details"
    assert "Region R" in alert.title and "Backlog" in alert.title
    assert result.critical_issues == 1


def test_between_25_and_40_is_warning(make_snapshot):
    result = _alerts_for(make_snapshot, state("r", [village("v", 70, 30)]))
    assert [a.type for a in result.alerts] == ["warning"]
    assert result.alerts[0].priority == "medium"
    assert result.alerts[0].action == "take-action"
    assert result.critical_issues == 0


def test_exactly_40_percent_is_warning_not_danger(make_snapshot):
    result = _alerts_for(make_snapshot, state("r", [village("v", 60, 40)]))
    assert [a.type for a in result.alerts] == ["warning"]


def test_exactly_25_percent_has_no_alert(make_snapshot):
    result = _alerts_for(make_snapshot, state("r", [village("v", 75, 25)]))
    assert result.alerts == []


def test_low_pending_rate_has_no_alert(make_snapshot):
    result = _alerts_for(make_snapshot, state("r", [village("v", 90, 10)]))
    assert result.alerts == []


def test_zero_claim_region_never_alerts(make_snapshot):
    result = _alerts_for(make_snapshot, state("r", [village("v", 0, 0)]), state("s", []))
    assert result.alerts == []
    assert result.critical_issues == 0


def test_alert_kind_matches_threshold_for_every_region(make_snapshot):
    rollup = aggregate(make_snapshot(*SAMPLE_STATES))
    result = generate_alerts(rollup)

    expected = []
    for r in rollup.regions.values():
        if r.pending_rate > 40:
            expected.append(("danger", r.region_name))
        elif r.pending_rate > 25:
            expected.append(("warning", r.region_name))

    assert [(a.type, a.title.split(": ", 1)[1].replace(" Backlog", "")) for a in result.alerts] == expected
    assert result.critical_issues == sum(1 for a in result.alerts if a.type == "danger")


def test_alerts_follow_region_order(make_snapshot):
    result = _alerts_for(
        make_snapshot,
        state("first", [village("v", 70, 30)], name="First"),
        state("second", [village("v", 10, 90)], name="Second"),
        state("third", [village("v", 65, 35)], name="Third"),
    )
    assert [a.type for a in result.alerts] == ["warning", "danger", "warning"]
    assert "First" in result.alerts[0].title
    assert "Third" in result.alerts[2].title
