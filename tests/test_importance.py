"""Tests for importance scoring."""

import pytest

from lecturelens.importance import identify_important, score_sentence
from lecturelens.lexicon import IMPORTANCE_THRESHOLD, IMPORTANCE_WEIGHTS
from lecturelens.transcript import sample_transcript
from lecturelens.types import TranscriptSentence


def _transcript(*texts: str) -> list[TranscriptSentence]:
    return [
        TranscriptSentence(id=f"s{i}", text=t, timestamp=i * 10.0, original_index=i)
        for i, t in enumerate(texts)
    ]


# --- score_sentence ---


def test_score_weights_by_term():
    assert score_sentence("This is important") == 3
    assert score_sentence("on the exam") == 4
    assert score_sentence("remember that") == 2


def test_score_counts_every_occurrence():
    assert score_sentence("exam, exam and another exam") == 12


def test_score_sums_across_terms():
    assert score_sentence("Remember this will be on the exam") == 6


def test_score_is_case_insensitive():
    assert score_sentence("IMPORTANT Definition") == 6


def test_score_matches_whole_words_only():
    assert score_sentence("the keyboard is on the table") == 0
    assert score_sentence("examination of examples") == 0
    assert score_sentence("fundamental ideas") == 0


def test_score_matches_phrases():
    assert score_sentence("Note this: gradients vanish") == 3
    assert score_sentence("You must know this") == 4
    assert score_sentence("note that this") == 0


def test_score_custom_weights():
    assert score_sentence("alpha beta alpha", weights={"alpha": 1.5}) == 3.0


def test_score_empty():
    assert score_sentence("") == 0


# --- identify_important ---


def test_threshold_tie_is_included():
    assert IMPORTANCE_THRESHOLD == 2.5
    assert IMPORTANCE_WEIGHTS["key"] == 2.5
    assert identify_important(_transcript("This is the key idea")) == [0]


def test_below_threshold_excluded():
    assert identify_important(_transcript("Remember to hydrate")) == []
    assert identify_important(_transcript("That is relevant")) == []


def test_repeated_low_weight_term_can_cross_threshold():
    assert identify_important(_transcript("relevant and relevant again")) == [0]


def test_example_sentence_flagged():
    transcript = _transcript(
        "Hello everyone", "Let us begin", "Some background", "More background",
        "A short aside", "Remember this will be on the exam",
    )
    assert identify_important(transcript) == [5]


def test_sentences_scored_independently():
    """A term split across two sentences does not form a phrase."""
    transcript = _transcript("Please note", "this carefully")
    assert identify_important(transcript) == []


def test_returns_original_indexes():
    full = _transcript("plain", "the exam", "plain", "crucial point")
    subset = [full[1], full[3]]
    assert identify_important(subset) == [1, 3]


def test_idempotent_and_valid():
    transcript = sample_transcript(seed=1)
    first = identify_important(transcript)
    second = identify_important(transcript)
    assert first == second
    assert all(0 <= i < len(transcript) for i in first)
    assert first == sorted(set(first))


def test_sample_lecture_flags():
    transcript = sample_transcript(seed=1)
    # Only the two bare "Remember" sentences stay under the threshold
    assert identify_important(transcript) == [i for i in range(20) if i not in (12, 17)]


def test_empty_transcript():
    assert identify_important([]) == []


@pytest.mark.parametrize("threshold,expected", [(2.0, [0, 1]), (3.0, [1]), (10.0, [])])
def test_custom_threshold(threshold, expected):
    transcript = _transcript("remember", "important")
    assert identify_important(transcript, threshold=threshold) == expected
