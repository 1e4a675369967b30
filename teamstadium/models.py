"""
models.py
---------

Typed records for Team Stadium opponent responses. The classifier builds
these from the raw payload so the aggregation and rendering code only ever
works with validated data.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple, Union


class DistanceType(Enum):
    SHORT = 1
    MILE = 2
    MIDDLE = 3
    LONG = 4
    # Dirt races carry their own marker instead of a length bucket.
    DIRT = 5


class Surface(Enum):
    TURF = 1
    DIRT = 2


class RunningStyle(Enum):
    FRONT_RUNNER = 1
    PACE_CHASER = 2
    LATE_SURGER = 3
    END_CLOSER = 4


class InvalidGradeError(ValueError):
    """Raised when an aptitude ordinal falls outside 1..8."""

    def __init__(self, value) -> None:
        super().__init__(f"Invalid aptitude grade {value!r}; expected an integer in 1..8")
        self.value = value


class UnknownCategoryError(ValueError):
    """Raised when a roster slot carries a distance or style code we cannot map."""

    def __init__(self, kind: str, value) -> None:
        super().__init__(f"Unknown {kind} code {value!r}")
        self.kind = kind
        self.value = value


@dataclass(frozen=True)
class OpponentSummary:
    rank: int
    display_name: str
    play_count: int
    login_day_count: int

    @property
    def intensity(self) -> Optional[float]:
        """Builds per login day, or None when the account has no login days."""
        if self.login_day_count == 0:
            return None
        return self.play_count / self.login_day_count


@dataclass(frozen=True)
class RosterEntry:
    """One team slot. Codes stay raw ints so empty slots never need mapping."""

    trained_chara_id: int
    distance_type: int
    running_style: int

    @property
    def is_empty(self) -> bool:
        return self.trained_chara_id == 0


@dataclass(frozen=True)
class CharacterAptitudes:
    trained_chara_id: int
    distance_short: int
    distance_mile: int
    distance_middle: int
    distance_long: int
    ground_turf: int
    ground_dirt: int
    style_front_runner: int
    style_pace_chaser: int
    style_late_surger: int
    style_end_closer: int


@dataclass(frozen=True)
class AggregateReport:
    opponent_name: str
    distance_distribution: Mapping[str, int] = field(default_factory=dict)
    surface_distribution: Mapping[str, int] = field(default_factory=dict)
    style_distribution: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Freeze the counters so a finished report cannot drift.
        for name in ("distance_distribution", "surface_distribution", "style_distribution"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))


# --------------------------------------------------------------------- #
# Response shapes
# --------------------------------------------------------------------- #


@dataclass(frozen=True)
class PreSelection:
    opponents: Tuple[OpponentSummary, ...]


@dataclass(frozen=True)
class PostSelection:
    opponent_name: str
    roster: Tuple[RosterEntry, ...]
    characters: Tuple[CharacterAptitudes, ...]


class _InapplicableType:
    """Marker for responses that are not opponent listings."""

    _instance: Optional["_InapplicableType"] = None

    def __new__(cls) -> "_InapplicableType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Inapplicable"

    def __bool__(self) -> bool:
        return False


Inapplicable = _InapplicableType()

Shape = Union[PreSelection, PostSelection, _InapplicableType]


__all__: List[str] = [
    "DistanceType",
    "Surface",
    "RunningStyle",
    "InvalidGradeError",
    "UnknownCategoryError",
    "OpponentSummary",
    "RosterEntry",
    "CharacterAptitudes",
    "AggregateReport",
    "PreSelection",
    "PostSelection",
    "Inapplicable",
    "Shape",
]
