"""HTTP client fetching word pages from the online dictionary."""

import asyncio
import logging

import httpx

from vocabcards.config import settings
from vocabcards.exceptions import DictionaryFetchError

logger = logging.getLogger(__name__)


class DictionaryClient:
    """Fetch dictionary HTML with a timeout and exponential backoff retries."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        retry_delay: float | None = None,
        user_agent: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.dictionary_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.dictionary_timeout
        self.max_retries = (
            max_retries if max_retries is not None else settings.dictionary_max_retries
        )
        self.retry_delay = (
            retry_delay if retry_delay is not None else settings.dictionary_retry_delay
        )
        self.user_agent = user_agent or settings.dictionary_user_agent
        self._transport = transport

    def word_url(self, word: str) -> str:
        """Search URL for a word, e.g. ``https://www.verbformen.com/?w=laufen``."""
        return str(httpx.URL(f"{self.base_url}/", params={"w": word}))

    async def _get(self, url: str) -> str:
        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent},
            follow_redirects=True,
            transport=self._transport,
        ) as client:
            response = await client.get(url)
            response.raise_for_status()
            return response.text

    async def fetch_word_html(self, word: str) -> str:
        """
        Fetch the dictionary page for a word.

        Raises:
            DictionaryFetchError: Every attempt failed (HTTP error status,
                timeout or connection error).
        """
        url = self.word_url(word)
        logger.info(f"Fetching HTML for word: {word} from {url}")

        last_error: Exception | None = None
        for attempt in range(1, self.max_retries + 1):
            try:
                html = await self._get(url)
                logger.debug(f"Fetched {len(html)} characters for '{word}'")
                return html
            except httpx.HTTPError as e:
                last_error = e
                logger.warning(
                    f"Attempt {attempt}/{self.max_retries} failed for '{word}': {e!r}"
                )
                if attempt < self.max_retries:
                    await asyncio.sleep(self.retry_delay * 2 ** (attempt - 1))

        logger.error(f"All {self.max_retries} attempts failed for word: {word}")
        raise DictionaryFetchError(word, self.max_retries, last_error)
