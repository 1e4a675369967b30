"""
classifier.py
-------------

Decide whether a decoded game-server response is a Team Stadium opponent
listing and, if so, which of the two shapes it holds:

* before picking an opponent the server sends three candidates with account
  metadata only (``opponent_info_array``);
* after picking, it sends the chosen opponent's full team and trained
  characters (``opponent_info_copy``).

Every other response flows through here too, so anything that does not
match is returned as :data:`Inapplicable` rather than raised.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping

from .models import (
    CharacterAptitudes,
    Inapplicable,
    OpponentSummary,
    PostSelection,
    PreSelection,
    RosterEntry,
    Shape,
)

logger = logging.getLogger(__name__)

OPPONENT_COUNT = 3

_APTITUDE_FIELDS: Dict[str, str] = {
    "distance_short": "proper_distance_short",
    "distance_mile": "proper_distance_mile",
    "distance_middle": "proper_distance_middle",
    "distance_long": "proper_distance_long",
    "ground_turf": "proper_ground_turf",
    "ground_dirt": "proper_ground_dirt",
    "style_front_runner": "proper_running_style_nige",
    "style_pace_chaser": "proper_running_style_senko",
    "style_late_surger": "proper_running_style_sashi",
    "style_end_closer": "proper_running_style_oikomi",
}


class _Malformed(Exception):
    """Internal signal that a payload does not fit the shape being parsed."""


def _mapping(value: Any, key: str) -> Mapping:
    if not isinstance(value, Mapping):
        raise _Malformed(f"{key} is not an object")
    return value


def _sequence(value: Any, key: str) -> List:
    if not isinstance(value, list):
        raise _Malformed(f"{key} is not an array")
    return value


def _int(obj: Mapping, key: str) -> int:
    value = obj.get(key)
    # bool is an int subclass; a flag is never a valid count or id.
    if isinstance(value, bool) or not isinstance(value, int):
        raise _Malformed(f"{key} is not an integer")
    return value


def _str(obj: Mapping, key: str) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise _Malformed(f"{key} is not a string")
    return value


def _opponent_summary(raw: Any) -> OpponentSummary:
    entry = _mapping(raw, "opponent_info")
    user = _mapping(entry.get("user_info"), "user_info")
    play_count = _int(user, "single_mode_play_count")
    login_days = _int(user, "total_login_day_count")
    if play_count < 0 or login_days < 0:
        raise _Malformed("negative account counters")
    return OpponentSummary(
        rank=_int(entry, "strength"),
        display_name=_str(user, "name"),
        play_count=play_count,
        login_day_count=login_days,
    )


def _roster_entry(raw: Any) -> RosterEntry:
    slot = _mapping(raw, "team_data")
    return RosterEntry(
        trained_chara_id=_int(slot, "trained_chara_id"),
        distance_type=_int(slot, "distance_type"),
        running_style=_int(slot, "running_style"),
    )


def _character(raw: Any) -> CharacterAptitudes:
    chara = _mapping(raw, "trained_chara")
    values = {attr: _int(chara, key) for attr, key in _APTITUDE_FIELDS.items()}
    return CharacterAptitudes(trained_chara_id=_int(chara, "trained_chara_id"), **values)


def _pre_selection(opponents: List) -> PreSelection:
    return PreSelection(opponents=tuple(_opponent_summary(raw) for raw in opponents))


def _post_selection(copy: Any) -> PostSelection:
    info = _mapping(copy, "opponent_info_copy")
    user = _mapping(info.get("user_info"), "user_info")
    team = _sequence(info.get("team_data_array"), "team_data_array")
    trained = _sequence(info.get("trained_chara_array"), "trained_chara_array")
    return PostSelection(
        opponent_name=_str(user, "name"),
        roster=tuple(_roster_entry(raw) for raw in team),
        characters=tuple(_character(raw) for raw in trained),
    )


def classify(response: Any) -> Shape:
    """Return the opponent-listing shape held by ``response``, or Inapplicable."""
    if not isinstance(response, Mapping):
        return Inapplicable
    data = response.get("data")
    if not isinstance(data, Mapping):
        return Inapplicable

    opponents = data.get("opponent_info_array")
    copy = data.get("opponent_info_copy")
    try:
        if isinstance(opponents, list) and len(opponents) == OPPONENT_COUNT:
            return _pre_selection(opponents)
        if copy is not None:
            return _post_selection(copy)
    except _Malformed as exc:
        logger.debug("Ignoring malformed opponent response: %s", exc)
    return Inapplicable


__all__ = ["OPPONENT_COUNT", "classify"]
