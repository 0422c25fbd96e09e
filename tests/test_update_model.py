import pytest

from models.update import RecordValidator, UpdateRecord, find_record
from services.sample_data import SAMPLE_UPDATES


@pytest.mark.parametrize("value, expected", [
    ("45", 45),
    (" -1 ", -1),
    ("12.5", 12),
    ("+3x", 3),
    ("abc", 0),
    ("", 0),
    (None, 0),
    (2.9, 2),
    (True, 1),
])
def test_parse_int_prefix(value, expected):
    assert RecordValidator.parse_int_prefix(value) == expected


@pytest.mark.parametrize("status, expected", [
    ("45%", 45),
    ("100%", 100),
    ("-20%", 0),
    ("", 0),
    ("done", 0),
    (" 7 %", 7),
])
def test_parse_progress(status, expected):
    assert RecordValidator.parse_progress(status) == expected


def test_health_labels():
    record = SAMPLE_UPDATES[2]
    assert record.health_label == "Risk/Behind"
    assert record.summary_health_label == "Risk"
    assert SAMPLE_UPDATES[1].health_label == "Potential Issue"
    assert SAMPLE_UPDATES[1].summary_health_label == "Warning"


def test_to_dict_uses_payload_keys():
    data = SAMPLE_UPDATES[0].to_dict()
    assert data["teamMember"] == "ManagerA"
    assert data["priorityGoal"] == "Engagement"
    assert data["dueDate"] == "2026-03-01"
    assert UpdateRecord.from_dict(data) == SAMPLE_UPDATES[0]


def test_from_dict_fills_defaults_and_coerces():
    record = UpdateRecord.from_dict({"id": 4, "health": "-1", "status": None})

    assert record.id == "4"
    assert record.team_member == "Unknown"
    assert record.priority_goal == "Other"
    assert record.initiative == "Unnamed Project"
    assert record.health == -1
    assert record.status == "0%"


@pytest.mark.parametrize("data", [None, [], "x", {}, {"id": ""}])
def test_from_dict_rejects_invalid(data):
    with pytest.raises(ValueError):
        UpdateRecord.from_dict(data)


def test_records_are_immutable():
    with pytest.raises(AttributeError):
        SAMPLE_UPDATES[0].feedback = "x"


def test_find_record():
    assert find_record(SAMPLE_UPDATES, "5").initiative == "API Rate Limiting"
    assert find_record(SAMPLE_UPDATES, "missing") is None


@pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
def test_parse_int_prefix_out_of_range_gives_default(value):
    assert RecordValidator.parse_int_prefix(value) == 0


def test_from_dict_rejects_non_finite_health():
    with pytest.raises(ValueError):
        UpdateRecord.from_dict({"id": "1", "health": float("inf")})
