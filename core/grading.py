"""
Recall Grader - All-or-Nothing Round Grading

Compares the lines a learner typed after a presentation against the active
study set. Matching is exact after normalization (case-fold and trimming);
there is deliberately no fuzzy or edit-distance matching.

Pass rule:
- Every active item must be matched by its word OR its reading
- A single missing item fails the whole round (no partial credit)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from core.schemas import CorpusItem


@dataclass(frozen=True)
class RecallResult:
    """
    Verdict for one recall round.
    """
    passed: bool
    missing: list[str] = field(default_factory=list)  # Display words not recalled
    extras: list[str] = field(default_factory=list)   # Normalized answers matching nothing

    def to_dict(self) -> dict:
        return {"pass": self.passed, "missing": list(self.missing), "extras": list(self.extras)}


def normalize_answer(text: str) -> str:
    """
    Canonical comparable form of a free-text answer.

    Idempotent: normalize_answer(normalize_answer(s)) == normalize_answer(s).
    """
    return (text or "").strip().casefold()


def split_lines(text: str) -> list[str]:
    """
    Split a multi-line text entry into trimmed, non-blank lines.
    """
    return [line.strip() for line in (text or "").splitlines() if line.strip()]


def grade_recall(
    active_items: Sequence[CorpusItem],
    lines: Iterable[str]
) -> RecallResult:
    """
    Grade submitted lines against the active study set.

    Pure function of its inputs: grading the same pair twice gives the same
    result, and no input (including an empty submission) raises.

    Args:
        active_items: Items presented this round, in display order
        lines: Free-text lines typed by the learner

    Returns:
        RecallResult with pass flag, missing words and extra answers
    """
    accepted: set[str] = set()
    for item in active_items:
        for form in (item.word, item.reading):
            normalized = normalize_answer(form)
            if normalized:
                accepted.add(normalized)

    # First-seen order, blanks discarded
    answers = list(dict.fromkeys(
        normalized for normalized in (normalize_answer(line) for line in lines) if normalized
    ))
    answered = set(answers)

    missing = [
        item.word
        for item in active_items
        if normalize_answer(item.word) not in answered
        and normalize_answer(item.reading) not in answered
    ]
    extras = [answer for answer in answers if answer not in accepted]

    return RecallResult(passed=not missing, missing=missing, extras=extras)
