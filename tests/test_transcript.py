"""Tests for transcript loading, export and the sample lecture."""

import json

import pytest

from lecturelens.transcript import (
    export_transcript_text,
    format_time,
    load_transcript,
    sample_transcript,
    transcript_to_dicts,
)
from lecturelens.types import TranscriptSentence


# --- format_time ---


@pytest.mark.parametrize("seconds,expected", [
    (0, "00:00"),
    (65, "01:05"),
    (125, "02:05"),
    (59.9, "00:59"),
    (60, "01:00"),
    (3599.99, "59:59"),
    (3600, "60:00"),
    (6005, "100:05"),
])
def test_format_time(seconds, expected):
    assert format_time(seconds) == expected


# --- export_transcript_text ---


def test_export_lines():
    transcript = [
        TranscriptSentence(id="a", text="Welcome.", timestamp=0.0, original_index=0),
        TranscriptSentence(id="b", text="The exam is Friday.", timestamp=65.4, original_index=1),
    ]
    assert export_transcript_text(transcript) == "[00:00] Welcome.\n[01:05] The exam is Friday."


def test_export_empty():
    assert export_transcript_text([]) == ""


# --- load_transcript ---


def test_load_list(tmp_path):
    path = tmp_path / "t.json"
    path.write_text(json.dumps([
        {"text": "Hello", "timestamp": 1.5},
        {"id": "custom", "text": "World", "timestamp": 3, "confidence": 0.5},
    ]))
    transcript = load_transcript(path)
    assert transcript[0] == TranscriptSentence(
        id="sentence-0", text="Hello", timestamp=1.5, confidence=0.9, original_index=0,
    )
    assert transcript[1].id == "custom"
    assert transcript[1].confidence == 0.5
    assert transcript[1].original_index == 1
    assert transcript[1].timestamp == 3.0


def test_load_non_ascii_utf8(tmp_path):
    path = tmp_path / "t.json"
    text = "Die Prüfung naïve café, 試験に出ます"
    path.write_bytes(json.dumps([{"text": text, "timestamp": 0}], ensure_ascii=False).encode("utf-8"))
    assert load_transcript(path)[0].text == text


def test_load_sentences_object(tmp_path):
    path = tmp_path / "t.json"
    path.write_text(json.dumps({"sentences": [{"text": "Only", "timestamp": 0}]}))
    assert [s.text for s in load_transcript(path)] == ["Only"]


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_transcript(tmp_path / "missing.json")


def test_load_invalid_json(tmp_path):
    path = tmp_path / "t.json"
    path.write_text("{not json")
    with pytest.raises(ValueError):
        load_transcript(path)


def test_load_wrong_shape(tmp_path):
    path = tmp_path / "t.json"
    path.write_text(json.dumps({"segments": []}))
    with pytest.raises(ValueError):
        load_transcript(path)


def test_load_entry_missing_timestamp(tmp_path):
    path = tmp_path / "t.json"
    path.write_text(json.dumps([{"text": "no time"}]))
    with pytest.raises(ValueError, match="entry 0"):
        load_transcript(path)


def test_roundtrip_through_dicts(tmp_path):
    original = sample_transcript(seed=5)
    path = tmp_path / "t.json"
    path.write_text(json.dumps(transcript_to_dicts(original)))
    assert load_transcript(path) == original


# --- sample_transcript ---


def test_sample_transcript_shape():
    transcript = sample_transcript(seed=0)
    assert len(transcript) == 20
    assert [s.original_index for s in transcript] == list(range(20))
    assert [s.id for s in transcript][:2] == ["sentence-0", "sentence-1"]
    timestamps = [s.timestamp for s in transcript]
    assert timestamps == sorted(timestamps)
    assert all(0.92 <= s.confidence <= 1.0 for s in transcript)


def test_sample_transcript_seeded():
    assert sample_transcript(seed=7) == sample_transcript(seed=7)
    assert sample_transcript(seed=7) != sample_transcript(seed=8)
