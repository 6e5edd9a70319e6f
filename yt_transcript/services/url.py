"""
YouTube URL validation, normalization and video ID extraction.

Accepted shapes (scheme optional, any of the known hosts):
    https://www.youtube.com/watch?v=ID
    https://m.youtube.com/watch?v=ID&t=42s
    https://youtu.be/ID?si=...
    https://www.youtube.com/embed/ID
    https://www.youtube.com/shorts/ID
    https://www.youtube.com/live/ID
    https://www.youtube.com/v/ID

All of them normalize to ``https://www.youtube.com/watch?v=ID``.
"""
import re
from typing import Optional
from urllib.parse import parse_qs, urlparse

from yt_transcript.core.constants import YouTubeConfig

VIDEO_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


def _parse_video_id(url: str) -> Optional[str]:
    if not isinstance(url, str):
        return None
    raw = url.strip()
    if not raw or any(ch.isspace() for ch in raw):
        return None
    if "://" not in raw:
        raw = f"https://{raw}"

    try:
        parsed = urlparse(raw)
        host = (parsed.hostname or "").lower()
    except ValueError:
        return None
    if parsed.scheme not in ("http", "https"):
        return None
    segments = [s for s in parsed.path.split("/") if s]

    candidate: Optional[str] = None
    if host in YouTubeConfig.SHORT_HOSTS:
        candidate = segments[0] if len(segments) == 1 else None
    elif host in YouTubeConfig.WATCH_HOSTS:
        if segments == ["watch"]:
            values = parse_qs(parsed.query).get("v")
            candidate = values[0] if values else None
        elif len(segments) == 2 and segments[0] in YouTubeConfig.PATH_PREFIXES:
            candidate = segments[1]

    if candidate and VIDEO_ID_PATTERN.match(candidate):
        return candidate
    return None


def is_valid_youtube_url(url: str) -> bool:
    """Structural check only, no network access."""
    return _parse_video_id(url) is not None


def normalize_youtube_url(url: str) -> str:
    """
    Rewrite any accepted URL shape into the canonical watch URL.

    Idempotent. Unrecognized input is returned stripped but otherwise unchanged.
    """
    video_id = _parse_video_id(url)
    if video_id is None:
        return url.strip() if isinstance(url, str) else url
    return YouTubeConfig.CANONICAL_WATCH_URL.format(video_id=video_id)


def extract_video_id(normalized_url: str) -> Optional[str]:
    """Return the video ID of a (normalized) URL, or None when there is none."""
    return _parse_video_id(normalized_url)
