"""Audio analysis: WAV reading, RMS energy, silence detection.

All functions operate on numpy arrays (float64, normalized to [-1, 1]).
WAV reading uses scipy.io.wavfile so no ffmpeg is needed for WAV input.
"""

from pathlib import Path

import numpy as np
import scipy.io.wavfile as wavfile

from lecturelens.types import AudioSignal, SilenceInterval

FRAME_MS = 100


# ---------------------------------------------------------------------------
# WAV I/O
# ---------------------------------------------------------------------------

def read_wav(path: str | Path) -> AudioSignal:
    """Read a WAV file into an AudioSignal.

    - Normalizes integer PCM to float64 in [-1, 1]
    - Passes through float WAVs as float64
    - Takes the first channel if stereo

    Raises:
        FileNotFoundError: if the file does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    sr, data = wavfile.read(str(path))

    if data.ndim > 1:
        data = data[:, 0]

    if np.issubdtype(data.dtype, np.integer):
        info = np.iinfo(data.dtype)
        samples = data.astype(np.float64) / max(abs(info.min), abs(info.max))
    else:
        samples = data.astype(np.float64)

    return AudioSignal(samples=samples, sample_rate=int(sr))


# ---------------------------------------------------------------------------
# RMS Energy
# ---------------------------------------------------------------------------

def compute_rms(samples: np.ndarray) -> float:
    """Compute RMS energy of the entire signal."""
    if len(samples) == 0:
        return 0.0
    return float(np.sqrt(np.mean(samples ** 2)))


def frame_size(sr: int, frame_ms: int = FRAME_MS) -> int:
    """Number of samples in one analysis frame (never less than one)."""
    # Half-samples round up: 8005 Hz gives 801, not 800
    return max(1, int(sr * frame_ms / 1000 + 0.5))


def compute_frame_rms(
    samples: np.ndarray,
    sr: int,
    frame_ms: int = FRAME_MS,
) -> np.ndarray:
    """Compute RMS energy over consecutive, non-overlapping frames.

    The final frame may be shorter than the rest; it is kept and its RMS
    is taken over the samples it has.
    """
    n = len(samples)
    if n == 0:
        return np.array([])

    step = frame_size(sr, frame_ms)
    n_frames = -(-n // step)
    rms = np.empty(n_frames)

    for i in range(n_frames):
        frame = samples[i * step : (i + 1) * step]
        rms[i] = np.sqrt(np.mean(frame ** 2))

    return rms


# ---------------------------------------------------------------------------
# Silence Detection
# ---------------------------------------------------------------------------

def detect_silence(
    signal: AudioSignal,
    threshold: float = 0.02,
    min_duration: float = 0.5,
) -> list[SilenceInterval]:
    """Find runs of quiet 100ms frames lasting at least min_duration seconds.

    A frame is quiet when its RMS is strictly below threshold. A run ends at
    the start of the first loud frame after it, or at the end of the signal
    if the recording finishes while still quiet. Shorter runs are dropped.

    Returns intervals in start order; they never overlap.
    """
    samples = signal.samples
    sr = signal.sample_rate
    if len(samples) == 0:
        return []

    step = frame_size(sr)
    rms = compute_frame_rms(samples, sr)
    # Run lengths are compared in whole samples, not float seconds
    min_samples = int(min_duration * sr + 0.5)

    intervals: list[SilenceInterval] = []
    run_start: int | None = None    # first sample of the current quiet run

    for i, level in enumerate(rms):
        frame_start = i * step
        if level < threshold:
            if run_start is None:
                run_start = frame_start
        elif run_start is not None:
            if frame_start - run_start >= min_samples:
                intervals.append(SilenceInterval(start=run_start / sr, end=frame_start / sr))
            run_start = None

    # Recording ended mid-silence
    if run_start is not None:
        end = len(samples)
        if end - run_start >= min_samples:
            intervals.append(SilenceInterval(start=run_start / sr, end=end / sr))

    return intervals


def is_in_silence(timestamp: float, intervals: list[SilenceInterval]) -> bool:
    """True if timestamp falls inside (or on the edge of) any interval."""
    return any(s.start <= timestamp <= s.end for s in intervals)


def total_silence(intervals: list[SilenceInterval]) -> float:
    """Total seconds covered by the intervals."""
    return sum(s.duration for s in intervals)
