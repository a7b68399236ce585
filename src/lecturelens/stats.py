"""Lecture statistics: speech/silence split, pace, keywords, confidence."""

import re
from collections import Counter

from lecturelens.analysis import total_silence
from lecturelens.density import peak_segment
from lecturelens.lexicon import STOP_WORDS
from lecturelens.types import (
    DensitySegment,
    LectureStats,
    SilenceInterval,
    TranscriptSentence,
)

TOP_KEYWORDS = 12

_NON_LETTERS = re.compile(r"[^a-z]")


def top_keywords(words: list[str], limit: int = TOP_KEYWORDS) -> list[tuple[str, int]]:
    """Most frequent content words, ties kept in first-seen order."""
    counts: Counter[str] = Counter()
    for w in words:
        word = _NON_LETTERS.sub("", w.lower())
        if len(word) > 2 and word not in STOP_WORDS:
            counts[word] += 1
    return counts.most_common(limit)


def compute_stats(
    transcript: list[TranscriptSentence],
    silence: list[SilenceInterval],
    duration: float,
    density: list[DensitySegment],
) -> LectureStats:
    """Compute the statistics panel figures for one lecture."""
    silent = total_silence(silence)
    speech = duration - silent

    words = " ".join(item.text for item in transcript).split()
    n_sentences = len(transcript)

    if n_sentences:
        avg_confidence = sum(item.confidence for item in transcript) / n_sentences
    else:
        avg_confidence = 0.0

    return LectureStats(
        total_silence=silent,
        silence_pct=round(silent / duration * 100, 1) if duration > 0 else 0.0,
        speech_time=speech,
        speech_pct=round(speech / duration * 100, 1) if duration > 0 else 0.0,
        total_words=len(words),
        avg_words_per_sentence=round(len(words) / n_sentences, 1) if n_sentences else 0.0,
        words_per_minute=round(len(words) / (speech / 60)) if speech > 0 else 0,
        top_keywords=top_keywords(words),
        avg_confidence=avg_confidence,
        peak_segment=peak_segment(density),
    )
