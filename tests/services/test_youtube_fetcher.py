import time
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from tenacity import wait_none
from youtube_transcript_api import TranscriptsDisabled, VideoUnavailable

from yt_transcript.core.exceptions import (
    ServiceBusyError,
    TranscriptFetchError,
    TranscriptsDisabledError,
    VideoNotFoundError,
)
from yt_transcript.core.providers.youtube_fetcher import (
    YouTubeTranscriptFetcher,
    translate_api_error,
)
from yt_transcript.models import ProxyConfig


def make_client(snippets=None, error=None):
    client = MagicMock()
    if error is not None:
        client.fetch.side_effect = error
    else:
        client.fetch.return_value = [SimpleNamespace(text=t) for t in snippets]
    return client


def test_translate_known_errors():
    assert isinstance(translate_api_error(TranscriptsDisabled("abc123")), TranscriptsDisabledError)
    assert isinstance(translate_api_error(VideoUnavailable("abc123")), VideoNotFoundError)


def test_translate_unknown_error_keeps_name():
    translated = translate_api_error(KeyError("captions"))
    assert type(translated) is TranscriptFetchError
    assert translated.name == "KeyError"


@pytest.mark.asyncio
async def test_fetch_joins_snippets():
    fetcher = YouTubeTranscriptFetcher()
    client = make_client(["Hello", " world. ", "", "Bye."])

    with patch.object(fetcher, "_build_client", return_value=client):
        text = await fetcher.fetch("abc123", "en")

    assert text == "Hello world. Bye."
    client.fetch.assert_called_once_with("abc123", languages=["en"])


@pytest.mark.asyncio
async def test_fetch_translates_library_errors():
    fetcher = YouTubeTranscriptFetcher()
    client = make_client(error=TranscriptsDisabled("abc123"))

    with patch.object(fetcher, "_build_client", return_value=client):
        with pytest.raises(TranscriptsDisabledError) as exc_info:
            await fetcher.fetch("abc123", "en")

    assert exc_info.value.name == "TranscriptsDisabled"


@pytest.mark.asyncio
async def test_fetch_timeout_is_service_busy():
    fetcher = YouTubeTranscriptFetcher(timeout_seconds=0.05)

    def slow_fetch(video_id, language):
        time.sleep(0.3)
        return "late"

    with patch.object(fetcher, "_fetch_sync", side_effect=slow_fetch):
        with pytest.raises(ServiceBusyError) as exc_info:
            await fetcher.fetch("abc123", "en")

    assert exc_info.value.name == "FetchTimeout"


@pytest.mark.asyncio
async def test_single_attempt_by_default():
    fetcher = YouTubeTranscriptFetcher()
    with patch.object(fetcher, "_fetch_sync", side_effect=ServiceBusyError("blocked")) as mock_fetch:
        with pytest.raises(ServiceBusyError):
            await fetcher.fetch("abc123", "en")
    assert mock_fetch.call_count == 1


@pytest.mark.asyncio
async def test_transient_failures_retried_when_configured():
    fetcher = YouTubeTranscriptFetcher(attempts=3, retry_wait=wait_none())
    with patch.object(
        fetcher, "_fetch_sync", side_effect=[ServiceBusyError("blocked"), "Hello"]
    ) as mock_fetch:
        assert await fetcher.fetch("abc123", "en") == "Hello"
    assert mock_fetch.call_count == 2


@pytest.mark.asyncio
async def test_permanent_failures_not_retried():
    fetcher = YouTubeTranscriptFetcher(attempts=3, retry_wait=wait_none())
    with patch.object(fetcher, "_fetch_sync", side_effect=VideoNotFoundError("gone")) as mock_fetch:
        with pytest.raises(VideoNotFoundError):
            await fetcher.fetch("abc123", "en")
    assert mock_fetch.call_count == 1


def test_proxy_passed_to_client():
    fetcher = YouTubeTranscriptFetcher(proxy=ProxyConfig(http="http://p:1", https="http://p:1"))
    with patch("yt_transcript.core.providers.youtube_fetcher.YouTubeTranscriptApi") as api_cls:
        fetcher._build_client()
    proxy_config = api_cls.call_args.kwargs["proxy_config"]
    assert proxy_config is not None
