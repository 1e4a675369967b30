"""
aptitude.py
-----------

Turn an opponent's team and trained characters into grade distributions.
Every filled team slot contributes one grade to each of three counters:

* distance: the aptitude for the slot's race distance (dirt races read the
  mile aptitude, the game has no separate dirt distance rating);
* surface: dirt aptitude on dirt races, turf aptitude otherwise;
* running style: the aptitude for the style the slot is run with.

Grades arrive as ordinals 1..8 and are reported as letters G..S.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional

import pandas as pd

from .labels import LabelLookup, labels as default_labels
from .models import (
    AggregateReport,
    CharacterAptitudes,
    DistanceType,
    InvalidGradeError,
    RosterEntry,
    RunningStyle,
    Surface,
    UnknownCategoryError,
)

logger = logging.getLogger(__name__)

GRADE_LETTERS = ("G", "F", "E", "D", "C", "B", "A", "S")
_GRADE_BY_LETTER = {letter: index + 1 for index, letter in enumerate(GRADE_LETTERS)}

_DISTANCE_FIELD: Dict[DistanceType, str] = {
    DistanceType.SHORT: "distance_short",
    DistanceType.MILE: "distance_mile",
    DistanceType.MIDDLE: "distance_middle",
    DistanceType.LONG: "distance_long",
    DistanceType.DIRT: "distance_mile",
}

_SURFACE_FIELD: Dict[Surface, str] = {
    Surface.TURF: "ground_turf",
    Surface.DIRT: "ground_dirt",
}

_STYLE_FIELD: Dict[RunningStyle, str] = {
    RunningStyle.FRONT_RUNNER: "style_front_runner",
    RunningStyle.PACE_CHASER: "style_pace_chaser",
    RunningStyle.LATE_SURGER: "style_late_surger",
    RunningStyle.END_CLOSER: "style_end_closer",
}

FRAME_COLUMNS = [
    "trained_chara_id",
    "distance_type",
    "distance_label",
    "distance_grade",
    "surface_label",
    "surface_grade",
    "running_style",
    "style_label",
    "style_grade",
]


def grade_letter(value: int) -> str:
    """Map an aptitude ordinal (1..8) to its letter grade."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidGradeError(value)
    if not 1 <= value <= len(GRADE_LETTERS):
        raise InvalidGradeError(value)
    return GRADE_LETTERS[value - 1]


def grade_value(letter: str) -> int:
    """Reverse of :func:`grade_letter`."""
    try:
        return _GRADE_BY_LETTER[letter]
    except KeyError:
        raise InvalidGradeError(letter) from None


def surface_for(distance_type: DistanceType) -> Surface:
    return Surface.DIRT if distance_type is DistanceType.DIRT else Surface.TURF


def _distance_type(code: int) -> DistanceType:
    try:
        return DistanceType(code)
    except ValueError:
        raise UnknownCategoryError("distance", code) from None


def _running_style(code: int) -> RunningStyle:
    try:
        return RunningStyle(code)
    except ValueError:
        raise UnknownCategoryError("running style", code) from None


@dataclass(frozen=True)
class ResolvedAptitude:
    """Letter grades for one team slot joined with its trained character."""

    trained_chara_id: int
    distance_type: DistanceType
    surface: Surface
    running_style: RunningStyle
    distance_grade: str
    surface_grade: str
    style_grade: str


def resolve_entry(entry: RosterEntry, character: CharacterAptitudes) -> ResolvedAptitude:
    distance_type = _distance_type(entry.distance_type)
    running_style = _running_style(entry.running_style)
    surface = surface_for(distance_type)
    return ResolvedAptitude(
        trained_chara_id=entry.trained_chara_id,
        distance_type=distance_type,
        surface=surface,
        running_style=running_style,
        distance_grade=grade_letter(getattr(character, _DISTANCE_FIELD[distance_type])),
        surface_grade=grade_letter(getattr(character, _SURFACE_FIELD[surface])),
        style_grade=grade_letter(getattr(character, _STYLE_FIELD[running_style])),
    )


def group_by_distance(roster: Iterable[RosterEntry]) -> Dict[int, List[RosterEntry]]:
    """Filled slots keyed by distance code, in order of first appearance."""
    groups: Dict[int, List[RosterEntry]] = {}
    for entry in roster:
        if entry.is_empty:
            continue
        groups.setdefault(entry.distance_type, []).append(entry)
    return groups


def iter_resolved(
    roster: Iterable[RosterEntry],
    characters: Iterable[CharacterAptitudes],
) -> Iterator[ResolvedAptitude]:
    """Yield one resolved record per filled slot whose character is present."""
    index: Dict[int, CharacterAptitudes] = {}
    for character in characters:
        index.setdefault(character.trained_chara_id, character)

    for entries in group_by_distance(roster).values():
        for entry in entries:
            character = index.get(entry.trained_chara_id)
            if character is None:
                # The team and character arrays are not always in sync.
                logger.debug("No trained character %s for team slot; skipping", entry.trained_chara_id)
                continue
            yield resolve_entry(entry, character)


def aggregate(
    roster: Iterable[RosterEntry],
    characters: Iterable[CharacterAptitudes],
    opponent_name: str = "",
) -> AggregateReport:
    """Count letter grades per dimension across the opponent's team."""
    distance: Dict[str, int] = {}
    surface: Dict[str, int] = {}
    style: Dict[str, int] = {}
    for resolved in iter_resolved(roster, characters):
        distance[resolved.distance_grade] = distance.get(resolved.distance_grade, 0) + 1
        surface[resolved.surface_grade] = surface.get(resolved.surface_grade, 0) + 1
        style[resolved.style_grade] = style.get(resolved.style_grade, 0) + 1
    return AggregateReport(
        opponent_name=opponent_name,
        distance_distribution=distance,
        surface_distribution=surface,
        style_distribution=style,
    )


def aptitude_frame(
    roster: Iterable[RosterEntry],
    characters: Iterable[CharacterAptitudes],
    labels: Optional[LabelLookup] = None,
) -> pd.DataFrame:
    """Per-slot table of resolved grades with localized category labels."""
    label = labels or default_labels()
    rows = [
        {
            "trained_chara_id": resolved.trained_chara_id,
            "distance_type": resolved.distance_type.value,
            "distance_label": label(resolved.distance_type),
            "distance_grade": resolved.distance_grade,
            "surface_label": label(resolved.surface),
            "surface_grade": resolved.surface_grade,
            "running_style": resolved.running_style.value,
            "style_label": label(resolved.running_style),
            "style_grade": resolved.style_grade,
        }
        for resolved in iter_resolved(roster, characters)
    ]
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


__all__ = [
    "GRADE_LETTERS",
    "FRAME_COLUMNS",
    "ResolvedAptitude",
    "grade_letter",
    "grade_value",
    "surface_for",
    "resolve_entry",
    "group_by_distance",
    "iter_resolved",
    "aggregate",
    "aptitude_frame",
]
