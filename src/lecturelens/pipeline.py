"""Lecture analysis pipeline: run every analyzer over one recording."""

import logging
import tempfile
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from lecturelens.analysis import detect_silence, read_wav
from lecturelens.audio import extract_audio, has_audio
from lecturelens.density import calculate_concept_density
from lecturelens.exam import filter_exam_relevant
from lecturelens.importance import identify_important
from lecturelens.stats import compute_stats
from lecturelens.summary import generate_summary
from lecturelens.types import AnalysisResult, AudioSignal, TranscriptSentence

logger = logging.getLogger(__name__)


@dataclass
class AnalysisConfig:
    """Tunable knobs for one analysis run."""
    silence_threshold: float = 0.02     # frame RMS below this is quiet
    min_silence_duration: float = 0.5   # seconds
    segment_size: int = 3               # sentences per density segment
    summary_sentences: int = 5
    max_workers: int = 4
    sample_rate: int = 44100            # used when decoding non-WAV media


def analyze(
    signal: AudioSignal | None,
    transcript: list[TranscriptSentence],
    config: AnalysisConfig | None = None,
) -> AnalysisResult:
    """Run all analyzers over a lecture's audio and transcript.

    Silence detection, importance scoring and density scoring are
    independent and run side by side; the summary and exam view wait only
    on the importance flags. Errors from any analyzer propagate.

    signal may be None for transcript-only analysis, in which case no
    silence is reported and the duration is the last sentence's timestamp.
    """
    config = config or AnalysisConfig()

    if signal is not None:
        duration = signal.duration
    else:
        duration = transcript[-1].timestamp if transcript else 0.0

    with ThreadPoolExecutor(max_workers=config.max_workers) as pool:
        silence_future = None
        if signal is not None:
            silence_future = pool.submit(
                detect_silence, signal,
                config.silence_threshold, config.min_silence_duration,
            )
        important_future = pool.submit(identify_important, transcript)
        density_future = pool.submit(
            calculate_concept_density, transcript, config.segment_size,
        )

        important = important_future.result()
        logger.info(f"Flagged {len(important)} of {len(transcript)} sentences as important")

        summary_future = pool.submit(
            generate_summary, transcript, important, config.summary_sentences,
        )
        exam_future = pool.submit(filter_exam_relevant, transcript, important)

        silence = silence_future.result() if silence_future is not None else []
        density = density_future.result()
        summary = summary_future.result()
        exam_transcript = exam_future.result()

    logger.info(f"Found {len(silence)} silence intervals")
    logger.info(f"Scored {len(density)} density segments")
    logger.info(f"Exam view keeps {len(exam_transcript)} sentences")

    return AnalysisResult(
        duration=duration,
        silence=silence,
        important=important,
        density=density,
        summary=summary,
        exam_transcript=exam_transcript,
        stats=compute_stats(transcript, silence, duration, density),
    )


def load_signal(
    media_path: Path,
    sample_rate: int = 44100,
    use_cache: bool = True,
) -> AudioSignal:
    """Decode a lecture recording into an AudioSignal.

    WAV files are read directly. Anything else (typically video) is decoded
    to mono WAV with ffmpeg first, reusing a cached decode when the same
    file was seen before.

    Raises:
        FileNotFoundError: if media_path does not exist.
        ValueError: if the file has no audio stream.
    """
    media_path = Path(media_path)
    if not media_path.exists():
        raise FileNotFoundError(f"File not found: {media_path}")

    if media_path.suffix.lower() == ".wav":
        logger.debug(f"Reading {media_path.name} directly, no decode needed")
        return read_wav(media_path)

    if not has_audio(media_path):
        raise ValueError(f"No audio stream in {media_path}")

    input_hash = None
    if use_cache:
        from lecturelens.cache import file_hash, get_cached_audio
        try:
            input_hash = file_hash(media_path)
        except OSError:
            input_hash = None
        cached = get_cached_audio(input_hash, sample_rate) if input_hash else None
        if cached is not None:
            return read_wav(cached)

    with tempfile.TemporaryDirectory() as tmpdir:
        audio_path = Path(tmpdir) / f"{media_path.stem}.wav"
        logger.info(f"Extracting audio from {media_path.name}")
        extract_audio(media_path, audio_path, sample_rate=sample_rate)
        if input_hash:
            from lecturelens.cache import store_audio_cache
            store_audio_cache(input_hash, sample_rate, audio_path)
        return read_wav(audio_path)


def analyze_file(
    media_path: Path,
    transcript: list[TranscriptSentence],
    config: AnalysisConfig | None = None,
    use_cache: bool = True,
) -> AnalysisResult:
    """Decode media_path and analyze it together with its transcript."""
    config = config or AnalysisConfig()
    signal = load_signal(media_path, sample_rate=config.sample_rate, use_cache=use_cache)
    logger.info(f"Loaded {signal.duration:.1f}s of audio at {signal.sample_rate} Hz")
    return analyze(signal, transcript, config)
