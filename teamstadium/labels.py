"""Display strings for categories and report captions."""

from __future__ import annotations

import os
from typing import Callable, Dict, Hashable, Optional

from .models import DistanceType, RunningStyle, Surface

DEFAULT_LANG = "en"

STRINGS: Dict[str, Dict[Hashable, str]] = {
    "en": {
        DistanceType.SHORT: "Short",
        DistanceType.MILE: "Mile",
        DistanceType.MIDDLE: "Middle",
        DistanceType.LONG: "Long",
        # Dirt races are reported under the mile bucket.
        DistanceType.DIRT: "Mile",
        Surface.TURF: "Turf",
        Surface.DIRT: "Dirt",
        RunningStyle.FRONT_RUNNER: "Front Runner",
        RunningStyle.PACE_CHASER: "Pace Chaser",
        RunningStyle.LATE_SURGER: "Late Surger",
        RunningStyle.END_CLOSER: "End Closer",
        "login_days": "login days",
        "builds": "builds",
        "per_day": "day",
        "current_opponent": "Current opponent",
        "distance_aptitude": "Distance aptitude",
        "surface_aptitude": "Surface aptitude",
        "style_aptitude": "Style aptitude",
    },
    "zh": {
        DistanceType.SHORT: "短距离",
        DistanceType.MILE: "英里",
        DistanceType.MIDDLE: "中距离",
        DistanceType.LONG: "长距离",
        DistanceType.DIRT: "英里",
        Surface.TURF: "草地",
        Surface.DIRT: "泥地",
        RunningStyle.FRONT_RUNNER: "逃",
        RunningStyle.PACE_CHASER: "先",
        RunningStyle.LATE_SURGER: "差",
        RunningStyle.END_CLOSER: "追",
        "login_days": "登陆日数",
        "builds": "育成数",
        "per_day": "日",
        "current_opponent": "当前对手",
        "distance_aptitude": "距离适性",
        "surface_aptitude": "场地适性",
        "style_aptitude": "跑法适性",
    },
}

LabelLookup = Callable[[Hashable], str]


def default_lang() -> str:
    """Language from ``TEAMSTADIUM_LANG``, falling back to English."""
    lang = (os.getenv("TEAMSTADIUM_LANG") or "").strip().lower()
    return lang if lang in STRINGS else DEFAULT_LANG


def label_for(key: Hashable, lang: Optional[str] = None) -> str:
    table = STRINGS.get(lang or default_lang(), STRINGS[DEFAULT_LANG])
    if key in table:
        return table[key]
    return STRINGS[DEFAULT_LANG].get(key, str(key))


def labels(lang: Optional[str] = None) -> LabelLookup:
    """Bind :func:`label_for` to one language."""
    resolved = lang or default_lang()
    return lambda key: label_for(key, resolved)


__all__ = ["DEFAULT_LANG", "STRINGS", "LabelLookup", "default_lang", "label_for", "labels"]
