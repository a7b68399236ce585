"""Exam mode: reduce the transcript to sentences worth revising."""

from lecturelens.lexicon import EXAM_SIGNALS
from lecturelens.types import TranscriptSentence


def filter_exam_relevant(
    transcript: list[TranscriptSentence],
    important: list[int],
    signals: tuple[str, ...] = EXAM_SIGNALS,
) -> list[TranscriptSentence]:
    """Keep sentences containing an exam signal or flagged as important.

    Kept sentences are returned unchanged and in input order, so their
    original_index still points into the full transcript.
    """
    flagged = set(important)
    return [
        item for item in transcript
        if item.original_index in flagged
        or any(signal in item.text.lower() for signal in signals)
    ]
