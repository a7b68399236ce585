"""Core data types for lecturelens."""

from dataclasses import asdict, dataclass, field

import numpy as np


@dataclass
class AudioSignal:
    """Mono audio, float64 samples normalized to [-1, 1]."""
    samples: np.ndarray
    sample_rate: int    # samples per second

    @property
    def duration(self) -> float:
        """Total length in seconds."""
        return len(self.samples) / self.sample_rate


@dataclass(frozen=True)
class TranscriptSentence:
    """One time-stamped sentence of the lecture transcript."""
    id: str
    text: str
    timestamp: float            # seconds from start of recording
    original_index: int         # position in the unfiltered transcript
    confidence: float = 0.9     # recognizer confidence in [0, 1]


@dataclass(frozen=True)
class SilenceInterval:
    """A stretch of audio quieter than the silence threshold."""
    start: float    # seconds
    end: float      # seconds
    label: str = "silence"

    @property
    def duration(self) -> float:
        return self.end - self.start


@dataclass(frozen=True)
class DensitySegment:
    """Concept density of a contiguous run of transcript sentences."""
    segment: int                # 0-based segment number
    start_idx: int              # first sentence (inclusive)
    end_idx: int                # last sentence (exclusive)
    keyword_score: int
    repetition_score: int
    energy_score: float
    score: float                # weighted combination of the sub-scores
    normalized_score: float     # min-max scaled across all segments
    text: str                   # display excerpt


@dataclass(frozen=True)
class LectureStats:
    """Summary statistics shown alongside the analysis."""
    total_silence: float
    silence_pct: float
    speech_time: float
    speech_pct: float
    total_words: int
    avg_words_per_sentence: float
    words_per_minute: int
    top_keywords: list[tuple[str, int]] = field(default_factory=list)
    avg_confidence: float = 0.0
    peak_segment: DensitySegment | None = None


@dataclass
class AnalysisResult:
    """Output of the lecturelens analysis pipeline."""
    duration: float
    silence: list[SilenceInterval]
    important: list[int]
    density: list[DensitySegment]
    summary: str
    exam_transcript: list[TranscriptSentence]
    stats: LectureStats

    def to_dict(self) -> dict:
        """JSON-safe representation of every artifact."""
        return {
            "duration": self.duration,
            "silence": [
                {**asdict(s), "duration": s.duration} for s in self.silence
            ],
            "important": list(self.important),
            "density": [asdict(seg) for seg in self.density],
            "summary": self.summary,
            "exam_transcript": [asdict(s) for s in self.exam_transcript],
            "stats": asdict(self.stats),
        }
