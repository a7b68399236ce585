"""Tests for core data types."""

import dataclasses
import json

import numpy as np
import pytest

from lecturelens.types import (
    AnalysisResult,
    AudioSignal,
    DensitySegment,
    LectureStats,
    SilenceInterval,
    TranscriptSentence,
)


def test_audio_signal_duration():
    signal = AudioSignal(samples=np.zeros(22050), sample_rate=44100)
    assert signal.duration == 0.5


def test_transcript_sentence_defaults():
    s = TranscriptSentence(id="sentence-0", text="Hello", timestamp=1.0, original_index=3)
    assert s.confidence == 0.9
    assert s.original_index == 3


def test_transcript_sentence_requires_original_index():
    with pytest.raises(TypeError):
        TranscriptSentence(id="sentence-0", text="Hello", timestamp=1.0)


def test_transcript_sentence_is_immutable():
    s = TranscriptSentence(id="sentence-0", text="Hello", timestamp=1.0, original_index=0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        s.text = "changed"


def test_silence_interval():
    s = SilenceInterval(start=1.5, end=4.0)
    assert s.duration == 2.5
    assert s.label == "silence"


def test_analysis_result_to_dict_is_json_safe():
    segment = DensitySegment(
        segment=0, start_idx=0, end_idx=1, keyword_score=1, repetition_score=0,
        energy_score=0.0, score=0.6, normalized_score=0.0, text="exam...",
    )
    sentence = TranscriptSentence(id="s0", text="exam", timestamp=0.0, original_index=0)
    result = AnalysisResult(
        duration=10.0,
        silence=[SilenceInterval(2.0, 3.0)],
        important=[0],
        density=[segment],
        summary="exam",
        exam_transcript=[sentence],
        stats=LectureStats(
            total_silence=1.0, silence_pct=10.0, speech_time=9.0, speech_pct=90.0,
            total_words=1, avg_words_per_sentence=1.0, words_per_minute=7,
            top_keywords=[("exam", 1)], avg_confidence=0.9, peak_segment=segment,
        ),
    )

    data = json.loads(json.dumps(result.to_dict()))
    assert data["silence"] == [{"start": 2.0, "end": 3.0, "label": "silence", "duration": 1.0}]
    assert data["density"][0]["normalized_score"] == 0.0
    assert data["exam_transcript"][0]["original_index"] == 0
    assert data["stats"]["peak_segment"]["segment"] == 0
    assert data["stats"]["top_keywords"] == [["exam", 1]]
