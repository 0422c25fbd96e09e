from dataclasses import replace

import pytest

from models.update import UpdateRecord
from services import aggregator
from services.sample_data import sample_updates


def _record(id, status="0%", health=0, goal="Growth", member="Ana") -> UpdateRecord:
    return UpdateRecord(
        id=id,
        team_member=member,
        title="",
        date="2026-02-01",
        priority_goal=goal,
        initiative="Launch",
        description="",
        health=health,
        status=status,
        due_date="",
    )


def test_average_progress_example():
    records = [_record("1", "20%"), _record("2", "45%"), _record("3", "100%")]
    assert aggregator.average_progress(records) == 55


def test_average_progress_empty_is_zero():
    assert aggregator.average_progress([]) == 0


@pytest.mark.parametrize("statuses, expected", [
    (["1%", "2%"], 2),        # 1.5 rounds up
    (["0%", "1%"], 1),        # 0.5 rounds up
    (["10%", "10%", "11%"], 10),
    (["abc", "50%"], 25),     # non-numeric counts as 0
    (["-20%", "20%"], 10),    # negative clamps to 0
    (["33.9%"], 33),
])
def test_average_progress_parsing_and_rounding(statuses, expected):
    records = [_record(str(i), status) for i, status in enumerate(statuses)]
    assert aggregator.average_progress(records) == expected


def test_health_distribution_folds_unknown_values_into_caution():
    records = [
        _record("1", health=1),
        _record("2", health=-1),
        _record("3", health=0),
        _record("4", health=5),
        _record("5", health=-3),
    ]

    assert aggregator.health_distribution(records) == {-1: 1, 0: 3, 1: 1}


def test_health_distribution_empty():
    assert aggregator.health_distribution([]) == {-1: 0, 0: 0, 1: 0}


def test_progress_by_goal_groups_by_exact_label():
    records = [
        _record("1", "20%", goal="Engagement"),
        _record("2", "90%", goal="Engagement"),
        _record("3", "45%", goal="Infrastructure"),
        _record("4", "10%", goal="engagement "),
    ]

    assert aggregator.progress_by_goal(records) == {
        "Engagement": 55,
        "Infrastructure": 45,
        "engagement ": 10,
    }


def test_progress_by_goal_empty():
    assert aggregator.progress_by_goal([]) == {}


def test_team_member_count():
    records = [_record("1", member="Ana"), _record("2", member="Ana"), _record("3", member="Bo")]
    assert aggregator.team_member_count(records) == 2
    assert aggregator.team_member_count([]) == 0


def test_compute_stats_on_sample_data():
    stats = aggregator.compute_stats(sample_updates())

    assert stats.total_updates == 10
    assert stats.team_member_count == 5
    assert stats.health_distribution == {-1: 3, 0: 2, 1: 5}
    assert stats.healthy_count == 5
    assert stats.at_risk_count == 3
    # (20+45+10+90+100+30+85+15+60+5) / 10 = 46
    assert stats.average_progress == 46
    assert stats.progress_by_goal["Technical Excellence"] == 65
    assert stats.progress_by_goal["Engagement"] == 65


def test_aggregation_does_not_mutate_input():
    records = sample_updates()
    before = list(records)

    aggregator.compute_stats(records)
    aggregator.group_by_member(records)

    assert records == before


def test_group_by_member_keeps_first_appearance_order():
    records = [
        _record("1", member="Tom"),
        _record("2", member="Ana"),
        _record("3", member="Tom"),
    ]

    grouped = aggregator.group_by_member(records)

    assert list(grouped) == ["Tom", "Ana"]
    assert [r.id for r in grouped["Tom"]] == ["1", "3"]


def test_health_chart_frame_omits_empty_buckets():
    records = [_record("1", health=1), _record("2", health=1), _record("3", health=-1)]

    df = aggregator.health_chart_frame(records)

    assert df["name"].tolist() == ["Healthy", "Risk/Behind"]
    assert df["value"].tolist() == [2, 1]


def test_goal_chart_frame():
    records = [_record("1", "40%", goal="A"), _record("2", "60%", goal="B")]

    df = aggregator.goal_chart_frame(records)

    assert df.to_dict("records") == [
        {"name": "A", "avg_progress": 40},
        {"name": "B", "avg_progress": 60},
    ]


def test_malformed_stored_health_string_counts_as_caution():
    record = replace(_record("1"), health="high")
    assert aggregator.health_distribution([record]) == {-1: 0, 0: 1, 1: 0}
