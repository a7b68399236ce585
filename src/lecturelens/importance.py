"""Flag transcript sentences that carry weighted importance cues."""

import re

from lecturelens.lexicon import IMPORTANCE_THRESHOLD, IMPORTANCE_WEIGHTS
from lecturelens.types import TranscriptSentence


def _term_pattern(term: str) -> re.Pattern:
    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)


_PATTERNS = {term: _term_pattern(term) for term in IMPORTANCE_WEIGHTS}


def score_sentence(
    text: str,
    weights: dict[str, float] = IMPORTANCE_WEIGHTS,
) -> float:
    """Sum occurrences * weight for every lexicon term found in text.

    Terms match case-insensitively on word boundaries, so "key" does not
    hit "keyboard" but "note this" hits "Note this:".
    """
    lowered = text.lower()
    score = 0.0
    for term, weight in weights.items():
        pattern = _PATTERNS.get(term) or _term_pattern(term)
        score += len(pattern.findall(lowered)) * weight
    return score


def identify_important(
    transcript: list[TranscriptSentence],
    weights: dict[str, float] = IMPORTANCE_WEIGHTS,
    threshold: float = IMPORTANCE_THRESHOLD,
) -> list[int]:
    """Return the original indexes of sentences scoring >= threshold.

    Each sentence is scored on its own. The result is ascending and free of
    duplicates.
    """
    important = {
        item.original_index
        for item in transcript
        if score_sentence(item.text, weights) >= threshold
    }
    return sorted(important)
