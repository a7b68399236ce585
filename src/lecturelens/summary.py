"""Extractive summary built from the flagged sentences."""

from lecturelens.types import TranscriptSentence

NO_CONTENT_SUMMARY = "No significant content detected in the transcript."
UNAVAILABLE_SUMMARY = "Unable to generate summary from available content."


def generate_summary(
    transcript: list[TranscriptSentence],
    important: list[int],
    max_sentences: int = 5,
) -> str:
    """Join the first max_sentences important sentences, in lecture order.

    Sentences are selected, never rewritten. Indexes that do not resolve to
    a sentence, and sentences with empty text, are skipped.
    """
    if not important:
        return NO_CONTENT_SUMMARY

    by_index = {item.original_index: item for item in transcript}
    selected = sorted(set(important))[:max_sentences]
    texts = [by_index[i].text for i in selected if i in by_index]
    summary = " ".join(t for t in texts if t)

    return summary or UNAVAILABLE_SUMMARY
