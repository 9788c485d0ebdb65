# mealdb_bridge/services/instructions.py
from __future__ import annotations

import re
from typing import Any, List

from mealdb_bridge.core.text import clean_text
from mealdb_bridge.models.recipe import InstructionStep

# Applied in this order, each one globally
_STEP_MARKERS = (
    re.compile(r"STEP\s*\d+\s*[-:]\s*", flags=re.I),
    re.compile(r"\d+\.\s*"),
    re.compile(r"DIRECTIONS?:", flags=re.I),
)
_LINE_SPLIT = re.compile(r"\n+")
_SENTENCE_SPLIT = re.compile(r"\.\s+(?=[A-Z])")

MIN_STEP_CHARS = 10
MAX_LINE_STEPS = 20
MAX_SENTENCE_STEPS = 15


def _placeholder(title: Any) -> str:
    return f"{clean_text(title) or 'Recipe'} preparation instructions"


def _by_lines(text: str) -> List[str]:
    pieces = (p.strip() for p in _LINE_SPLIT.split(text))
    return [p for p in pieces if len(p) > MIN_STEP_CHARS][:MAX_LINE_STEPS]


def _by_sentences(text: str) -> List[str]:
    out: List[str] = []
    for p in _SENTENCE_SPLIT.split(text):
        p = p.strip()
        if p.endswith("."):
            p = p[:-1]
        p = p + "."
        if len(p) > MIN_STEP_CHARS:
            out.append(p)
    return out[:MAX_SENTENCE_STEPS]


def split_instructions(raw_text: Any) -> List[str]:
    """
    Break one instructions blob into step strings.

    Fragments of 10 characters or less are treated as noise and dropped, which
    can swallow a legitimately short step. Returns [] for absent/blank input.
    """
    raw = clean_text(raw_text)
    if not raw:
        return []

    text = raw_text
    for marker in _STEP_MARKERS:
        text = marker.sub("\n", text)

    steps = _by_lines(text)
    if len(steps) <= 1:
        steps = _by_sentences(text)
    if not steps:
        steps = [raw]
    return steps


def segment_instructions(raw_text: Any, title: Any = None) -> List[InstructionStep]:
    steps = split_instructions(raw_text) or [_placeholder(title)]
    return [
        InstructionStep(step=i, instruction=s, duration=0)
        for i, s in enumerate(steps, start=1)
    ]
