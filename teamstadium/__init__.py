"""Team Stadium opponent analyzer core package."""

from .analysis import analyze_response, load_response, response_frame
from .aptitude import aggregate, aptitude_frame, grade_letter, grade_value
from .classifier import classify
from .labels import label_for, labels
from .models import (
    AggregateReport,
    CharacterAptitudes,
    DistanceType,
    Inapplicable,
    InvalidGradeError,
    OpponentSummary,
    PostSelection,
    PreSelection,
    RosterEntry,
    RunningStyle,
    Surface,
    UnknownCategoryError,
)
from .render import render

__all__ = [
    "AggregateReport",
    "CharacterAptitudes",
    "DistanceType",
    "Inapplicable",
    "InvalidGradeError",
    "OpponentSummary",
    "PostSelection",
    "PreSelection",
    "RosterEntry",
    "RunningStyle",
    "Surface",
    "UnknownCategoryError",
    "aggregate",
    "aptitude_frame",
    "grade_letter",
    "grade_value",
    "classify",
    "label_for",
    "labels",
    "render",
    "load_response",
    "analyze_response",
    "response_frame",
]
