"""File-based cache for audio extracted from lecture recordings.

Only the decoded audio is cached; analysis results are always recomputed.
"""

import hashlib
import logging
import os
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

CACHE_DIR = Path(os.environ.get("LECTURELENS_CACHE_DIR", "~/.cache/lecturelens")).expanduser()


def file_hash(path: Path) -> str:
    """Compute SHA-256 hash of a file's contents."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _extract_cache_path(input_hash: str, sample_rate: int) -> Path:
    return CACHE_DIR / "extract" / f"{input_hash}_{sample_rate}.wav"


def get_cached_audio(input_hash: str, sample_rate: int) -> Path | None:
    """Return cached extracted audio path, or None if not cached."""
    path = _extract_cache_path(input_hash, sample_rate)
    if path.exists() and path.stat().st_size > 0:
        logger.info(f"Cache hit: audio extraction ({input_hash[:12]}...)")
        return path
    return None


def store_audio_cache(input_hash: str, sample_rate: int, audio_path: Path) -> Path:
    """Copy extracted audio into cache. Returns the cache path."""
    dest = _extract_cache_path(input_hash, sample_rate)
    dest.parent.mkdir(parents=True, exist_ok=True)
    tmp = dest.with_suffix(".tmp")
    shutil.copy2(audio_path, tmp)
    os.replace(tmp, dest)
    logger.info(f"Cached audio extraction ({input_hash[:12]}...)")
    return dest
