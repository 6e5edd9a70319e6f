"""
Store key layouts and fixed limits.
"""


class CacheKeyConfig:
    """Key layout for cached transcript outcomes."""
    PREFIX = "transcript"


class UsageKeyConfig:
    """Key layout for usage counters."""
    DAILY_PREFIX = "requests:daily"
    VIDEO_PREFIX = "requests:video"
    ERROR_PREFIX = "errors:daily"
    DATE_FORMAT = "%Y-%m-%d"  # UTC day


class YouTubeConfig:
    """Configuration for YouTube URL handling."""
    CANONICAL_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
    WATCH_HOSTS = frozenset({
        "youtube.com",
        "www.youtube.com",
        "m.youtube.com",
        "music.youtube.com",
        "youtube-nocookie.com",
        "www.youtube-nocookie.com",
    })
    SHORT_HOSTS = frozenset({"youtu.be", "www.youtu.be"})
    PATH_PREFIXES = ("embed", "v", "shorts", "live")
