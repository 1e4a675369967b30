"""High-level analysis entry points built on top of the classifier and renderer."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd

from .aptitude import FRAME_COLUMNS, aptitude_frame
from .classifier import classify
from .labels import labels
from .models import Inapplicable, PostSelection
from .render import render

logger = logging.getLogger(__name__)


def load_response(source: Union[str, Path]) -> Any:
    """Decode one JSON response from a file path, or stdin when ``source`` is ``-``."""
    if str(source) == "-":
        return json.load(sys.stdin)
    with Path(source).open(encoding="utf-8") as fh:
        return json.load(fh)


def analyze_response(response: Any, lang: Optional[str] = None) -> List[str]:
    """
    Classify a single decoded response and return its display lines.

    Parameters
    ----------
    response:
        The decoded server response, usually ``{"data": {...}}``.
    lang:
        Label language (``en`` or ``zh``). Defaults to ``TEAMSTADIUM_LANG``.

    Non-opponent responses produce an empty list. Invalid grades or unknown
    category codes raise, and no partial report is returned.
    """
    shape = classify(response)
    if shape is Inapplicable:
        logger.debug("Response is not an opponent listing")
        return []
    return render(shape, labels(lang))


def response_frame(response: Any, lang: Optional[str] = None) -> pd.DataFrame:
    """Per-slot aptitude table for a post-selection response (empty otherwise)."""
    shape = classify(response)
    if not isinstance(shape, PostSelection):
        return pd.DataFrame(columns=FRAME_COLUMNS)
    frame = aptitude_frame(shape.roster, shape.characters, labels(lang))
    frame.insert(0, "opponent_name", shape.opponent_name)
    return frame


__all__ = [
    "load_response",
    "analyze_response",
    "response_frame",
]
