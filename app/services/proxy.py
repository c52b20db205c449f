from typing import Optional

from loguru import logger
from youtube_transcript_api.proxies import GenericProxyConfig


class ProxyService:
    def __init__(self, proxy_url: Optional[str] = None):
        self.proxy_url = proxy_url

    def get_proxy_config(self) -> Optional[GenericProxyConfig]:
        """
        Builds the proxy configuration for caption requests.
        Returns None (direct connection) when no proxy URL is configured.
        """
        if not self.proxy_url:
            return None

        logger.info("Fetching transcript through configured proxy")
        return GenericProxyConfig(http_url=self.proxy_url, https_url=self.proxy_url)
