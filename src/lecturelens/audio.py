"""Lecture media ingestion via ffmpeg/ffprobe."""

import json
import subprocess
from pathlib import Path


def probe_streams(path: Path) -> list[dict]:
    """Return ffprobe's stream descriptions for a media file."""
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    cmd = [
        "ffprobe", "-v", "quiet", "-print_format", "json",
        "-show_streams", str(path),
    ]
    result = subprocess.run(cmd, capture_output=True, text=True, timeout=30)
    result.check_returncode()
    return json.loads(result.stdout).get("streams", [])


def has_audio(path: Path) -> bool:
    """True if the file carries at least one audio stream."""
    return any(s.get("codec_type") == "audio" for s in probe_streams(path))


def extract_audio(input_path: Path, output_path: Path, sample_rate: int = 44100) -> Path:
    """Decode the first audio track of a recording to mono 16-bit WAV."""
    if not input_path.exists():
        raise FileNotFoundError(f"File not found: {input_path}")
    cmd = [
        "ffmpeg", "-y", "-i", str(input_path),
        "-vn", "-ar", str(sample_rate), "-ac", "1",
        "-c:a", "pcm_s16le", "-f", "wav",
        str(output_path),
    ]
    # Long lectures take a while to decode
    subprocess.run(
        cmd, capture_output=True, text=True, timeout=600,
    ).check_returncode()
    return output_path
