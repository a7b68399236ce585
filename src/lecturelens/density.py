"""Concept density timeline: score fixed-size runs of transcript sentences.

Each segment gets three raw sub-scores:

- keyword: whole-word hits against DENSITY_KEYWORDS
- repetition: how often longer words recur within the segment
- energy: emphatic punctuation and shouted (all-caps) words

The weighted total is then min-max normalized across the whole transcript,
so a segment's normalized score is only meaningful relative to its lecture.
"""

import re
from collections import Counter

from lecturelens.lexicon import DENSITY_KEYWORDS
from lecturelens.types import DensitySegment, TranscriptSentence

KEYWORD_WEIGHT = 0.6
REPETITION_WEIGHT = 0.25
ENERGY_WEIGHT = 0.15

# A single repeated word contributes at most this much
REPETITION_CAP = 3
EXCERPT_CHARS = 100

_EMPHASIS = re.compile(r"[!?]")
_CAPS_RUN = re.compile(r"[A-Z]{2,}")


def keyword_score(text: str, keywords: tuple[str, ...] = DENSITY_KEYWORDS) -> int:
    """Count whole-word keyword hits in lower-cased text."""
    return sum(
        len(re.findall(rf"\b{re.escape(kw)}\b", text))
        for kw in keywords
    )


def repetition_score(text: str) -> int:
    """Sum min(count, 3) over every word longer than 4 chars seen twice or more."""
    counts = Counter(w for w in text.split() if len(w) > 4)
    return sum(min(n, REPETITION_CAP) for n in counts.values() if n > 1)


def energy_score(sentences: list[str]) -> float:
    """0.5 per '!' or '?' plus 0.3 per run of 2+ capitals, summed per sentence."""
    score = 0.0
    for text in sentences:
        score += len(_EMPHASIS.findall(text)) * 0.5
        score += len(_CAPS_RUN.findall(text)) * 0.3
    return score


def calculate_concept_density(
    transcript: list[TranscriptSentence],
    segment_size: int = 3,
    keywords: tuple[str, ...] = DENSITY_KEYWORDS,
) -> list[DensitySegment]:
    """Split the transcript into segments of segment_size sentences and score them.

    The last segment may be shorter. Normalization needs every raw score, so
    segments are scored first and scaled in a second pass. When all raw
    scores are equal the range falls back to 1 and every segment gets 0.0.

    Raises:
        ValueError: if segment_size is less than 1.
    """
    if segment_size < 1:
        raise ValueError(f"segment_size must be >= 1, got {segment_size}")

    raw = []
    for seg_num, start in enumerate(range(0, len(transcript), segment_size)):
        end = min(start + segment_size, len(transcript))
        texts = [item.text for item in transcript[start:end]]
        combined = " ".join(texts).lower()

        kw = keyword_score(combined, keywords)
        rep = repetition_score(combined)
        energy = energy_score(texts)
        total = (
            kw * KEYWORD_WEIGHT
            + rep * REPETITION_WEIGHT
            + energy * ENERGY_WEIGHT
        )
        raw.append((seg_num, start, end, kw, rep, energy, total, combined))

    if not raw:
        return []

    scores = [r[6] for r in raw]
    min_score = min(scores)
    score_range = (max(scores) - min_score) or 1

    return [
        DensitySegment(
            segment=seg_num,
            start_idx=start,
            end_idx=end,
            keyword_score=kw,
            repetition_score=rep,
            energy_score=energy,
            score=total,
            normalized_score=(total - min_score) / score_range,
            text=combined[:EXCERPT_CHARS] + "...",
        )
        for seg_num, start, end, kw, rep, energy, total, combined in raw
    ]


def heatmap_level(normalized_score: float) -> str:
    """Bucket a normalized score into 'low', 'medium' or 'high'."""
    if normalized_score < 0.33:
        return "low"
    if normalized_score < 0.67:
        return "medium"
    return "high"


def peak_segment(segments: list[DensitySegment]) -> DensitySegment | None:
    """The first segment with the highest normalized score, or None."""
    if not segments:
        return None
    return max(segments, key=lambda s: s.normalized_score)
