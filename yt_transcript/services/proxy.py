from typing import Optional

from loguru import logger

from yt_transcript.core.config import settings
from yt_transcript.models.proxy import ProxyConfig


class ProxyService:
    @staticmethod
    def get_proxies() -> Optional[ProxyConfig]:
        """
        Builds the proxy configuration for transcript fetches from settings.
        Returns None when no proxy URL is configured (direct connection).
        """
        if not (settings.PROXY_HTTP_URL or settings.PROXY_HTTPS_URL):
            logger.info("Proxy settings not configured. Using direct connection.")
            return None

        # A single configured URL is used for both schemes
        http_url = settings.PROXY_HTTP_URL or settings.PROXY_HTTPS_URL
        https_url = settings.PROXY_HTTPS_URL or settings.PROXY_HTTP_URL
        logger.info("Fetching transcripts through the configured proxy")
        return ProxyConfig(http=http_url, https=https_url)
