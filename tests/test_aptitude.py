import pytest

from teamstadium.aptitude import (
    GRADE_LETTERS,
    aggregate,
    aptitude_frame,
    grade_letter,
    grade_value,
    group_by_distance,
)
from teamstadium.classifier import classify
from teamstadium.labels import labels
from teamstadium.models import InvalidGradeError, UnknownCategoryError

from payloads import example_charas, example_team, post_selection_response, slot, trained_chara


def _shape(team=None, charas=None):
    return classify(post_selection_response(team, charas))


def test_grade_letters_cover_one_to_eight_in_order():
    assert [grade_letter(v) for v in range(1, 9)] == ["G", "F", "E", "D", "C", "B", "A", "S"]
    for value in range(1, 9):
        assert grade_value(grade_letter(value)) == value
    assert len(set(GRADE_LETTERS)) == 8


@pytest.mark.parametrize("value", [0, 9, -1, None, "A", True])
def test_grade_letter_rejects_out_of_range(value):
    with pytest.raises(InvalidGradeError):
        grade_letter(value)


def test_aggregate_example_team():
    shape = _shape()
    report = aggregate(shape.roster, shape.characters, opponent_name=shape.opponent_name)

    assert report.opponent_name == "Dave"
    assert dict(report.distance_distribution) == {"A": 1, "E": 1}
    assert dict(report.surface_distribution) == {"A": 1, "C": 1}
    assert dict(report.style_distribution) == {"A": 1, "F": 1}


def test_counts_match_resolved_slots():
    team = example_team() + [slot(3, 3, 2), slot(99, 4, 3), slot(1, 4, 3)]
    charas = example_charas() + [trained_chara(3, distance_middle=8, ground_turf=6, running_style_senko=8)]
    shape = _shape(team, charas)
    report = aggregate(shape.roster, shape.characters)

    # ids 1, 2, 3 and the second use of 1 resolve; 0 is empty and 99 is unknown.
    for distribution in (
        report.distance_distribution,
        report.surface_distribution,
        report.style_distribution,
    ):
        assert sum(distribution.values()) == 4
        assert all(count >= 0 for count in distribution.values())


def test_dirt_reads_mile_and_dirt_aptitudes():
    charas = [trained_chara(5, distance_mile=8, distance_short=2, ground_dirt=6, ground_turf=2)]
    shape = _shape([slot(5, 5, 1)], charas)
    report = aggregate(shape.roster, shape.characters)

    assert dict(report.distance_distribution) == {"S": 1}
    assert dict(report.surface_distribution) == {"B": 1}


def test_distribution_order_follows_distance_groups():
    team = [slot(1, 3, 1), slot(2, 1, 1), slot(3, 3, 1)]
    charas = [
        trained_chara(1, distance_middle=8),
        trained_chara(2, distance_short=2),
        trained_chara(3, distance_middle=7),
    ]
    shape = _shape(team, charas)

    assert list(group_by_distance(shape.roster)) == [3, 1]
    report = aggregate(shape.roster, shape.characters)
    assert list(report.distance_distribution) == ["S", "A", "F"]


def test_invalid_grade_aborts_aggregation():
    charas = [trained_chara(1, distance_short=9)]
    shape = _shape([slot(1, 1, 1)], charas)
    with pytest.raises(InvalidGradeError) as excinfo:
        aggregate(shape.roster, shape.characters)
    assert excinfo.value.value == 9


def test_unknown_distance_code_is_reported():
    shape = _shape([slot(1, 6, 1)], [trained_chara(1)])
    with pytest.raises(UnknownCategoryError) as excinfo:
        aggregate(shape.roster, shape.characters)
    assert excinfo.value.kind == "distance"


def test_empty_slots_are_never_inspected():
    shape = _shape([slot(0, 9, 9)], [])
    report = aggregate(shape.roster, shape.characters)
    assert dict(report.distance_distribution) == {}


def test_report_is_read_only():
    shape = _shape()
    report = aggregate(shape.roster, shape.characters)
    with pytest.raises(TypeError):
        report.distance_distribution["S"] = 3


def test_aptitude_frame_rows_and_labels():
    shape = _shape()
    df = aptitude_frame(shape.roster, shape.characters, labels("en"))

    assert list(df["trained_chara_id"]) == [1, 2]
    dirt_row = df[df["trained_chara_id"] == 2].iloc[0]
    assert dirt_row["distance_label"] == "Mile"
    assert dirt_row["distance_grade"] == "E"
    assert dirt_row["surface_label"] == "Dirt"
    assert dirt_row["surface_grade"] == "C"
    assert dirt_row["style_label"] == "End Closer"
    assert dirt_row["style_grade"] == "F"


def test_aptitude_frame_empty_keeps_columns():
    df = aptitude_frame([], [], labels("zh"))
    assert df.empty
    assert "style_grade" in df.columns
