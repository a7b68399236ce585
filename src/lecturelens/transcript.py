"""Transcript loading, export formatting and the demo transcript.

Transcripts come from an external speech-to-text service as JSON: either a
list of sentence objects or {"sentences": [...]}, each with at least "text"
and "timestamp" (seconds). The canned sample transcript stands in for that
service when no transcript file is given.
"""

import json
import logging
import math
import random
from dataclasses import asdict
from pathlib import Path

from lecturelens.types import TranscriptSentence

logger = logging.getLogger(__name__)

DEFAULT_CONFIDENCE = 0.9

_SAMPLE_LECTURE = [
    ("Today we're going to discuss the important concept of neural networks.", 5),
    ("Definition: A neural network is a series of algorithms that recognize patterns in data.", 15),
    ("This is a note this concept is fundamental to modern AI.", 30),
    ("Let me repeat: neural networks are essential for deep learning applications.", 45),
    ("The formula for a neuron is: output = activation(sum(weights * inputs) + bias).", 60),
    ("Remember this will be on the exam, especially the backpropagation algorithm.", 75),
    ("Important: gradient descent helps us optimize the weights.", 90),
    ("Definition of backpropagation: the process of computing gradients of weights.", 105),
    ("Note this technique reduces computational complexity significantly.", 120),
    ("The formula for ReLU activation is: max(0, x).", 135),
    ("This is important for preventing vanishing gradient problems.", 150),
    ("Exam tip: understand the differences between CNNs and RNNs.", 165),
    ("Remember to normalize your input data before training.", 180),
    ("Definition: Convolutional Neural Networks are specialized for image processing.", 195),
    ("Important: hyperparameter tuning can make or break your model.", 210),
    ("Note this: regularization prevents overfitting in neural networks.", 225),
    ("The formula for dropout is randomly setting activations to zero.", 240),
    ("Remember: batch normalization improves training stability.", 255),
    ("Definition of loss function: measures how wrong our model is.", 270),
    ("Important exam concept: architecture matters as much as optimization.", 285),
]


def format_time(seconds: float) -> str:
    """Format seconds as MM:SS, flooring both fields."""
    mins = math.floor(seconds / 60)
    secs = math.floor(seconds % 60)
    return f"{mins:02d}:{secs:02d}"


def export_transcript_text(transcript: list[TranscriptSentence]) -> str:
    """Render one '[MM:SS] text' line per sentence."""
    return "\n".join(
        f"[{format_time(item.timestamp)}] {item.text}" for item in transcript
    )


def _parse_sentence(index: int, entry: dict) -> TranscriptSentence:
    try:
        text = str(entry["text"])
        timestamp = float(entry["timestamp"])
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Invalid transcript entry {index}: {e}") from e
    confidence = entry.get("confidence")
    return TranscriptSentence(
        id=str(entry.get("id") or f"sentence-{index}"),
        text=text,
        timestamp=timestamp,
        confidence=DEFAULT_CONFIDENCE if confidence is None else float(confidence),
        original_index=index,
    )


def load_transcript(path: str | Path) -> list[TranscriptSentence]:
    """Load a JSON transcript, numbering sentences by their position.

    Raises:
        FileNotFoundError: if the file does not exist.
        ValueError: if the JSON is not a sentence list or an entry lacks
            text or timestamp.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Transcript is not valid JSON: {path}") from e

    if isinstance(data, dict):
        data = data.get("sentences")
    if not isinstance(data, list):
        raise ValueError(f"Transcript must be a list of sentences: {path}")

    transcript = [_parse_sentence(i, entry) for i, entry in enumerate(data)]
    logger.info(f"Loaded {len(transcript)} transcript sentences from {path.name}")
    return transcript


def transcript_to_dicts(transcript: list[TranscriptSentence]) -> list[dict]:
    """JSON-safe form of a transcript (inverse of load_transcript)."""
    return [asdict(item) for item in transcript]


def sample_transcript(seed: int | None = None) -> list[TranscriptSentence]:
    """Return the canned neural-network lecture used in demo mode."""
    rng = random.Random(seed)
    return [
        TranscriptSentence(
            id=f"sentence-{i}",
            text=text,
            timestamp=float(timestamp),
            confidence=0.92 + rng.random() * 0.08,
            original_index=i,
        )
        for i, (text, timestamp) in enumerate(_SAMPLE_LECTURE)
    ]
