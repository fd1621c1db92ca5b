"""Feed data sources: remote service, cloud store and local cache."""

import asyncio
from datetime import date

import feedparser
import httpx
import structlog

from cleanfeeds.feeds.models import CannotFetchError, Feed, User

logger = structlog.get_logger(__name__)


class RemoteFeedSource:
    def __init__(
        self,
        url: str | None = None,
        timeout: float = 10.0,
        max_feeds: int = 50,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._url = url
        self._timeout = timeout
        self._max_feeds = max_feeds
        self._transport = transport

    def _published_on(self, entry) -> str:
        parsed = entry.get("published_parsed") or entry.get("updated_parsed")
        if parsed:
            return date(*parsed[:3]).isoformat()
        return ""

    async def get_feeds(self, user: User) -> list[Feed]:
        if not self._url:
            logger.debug("remote_source_unconfigured")
            return []

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self._timeout
            ) as client:
                response = await client.get(
                    self._url, auth=(user.email, user.password)
                )
                response.raise_for_status()
                content = response.text
        except httpx.HTTPError as exc:
            raise CannotFetchError(f"request to '{self._url}' failed: {exc}") from exc

        parsed = await asyncio.to_thread(feedparser.parse, content)
        if not parsed.version:
            raise CannotFetchError(f"URL '{self._url}' is not a valid feed")

        return [
            Feed(
                title=entry.get("title", ""),
                author=entry.get("author", ""),
                published_on=self._published_on(entry),
            )
            for entry in parsed.entries[: self._max_feeds]
        ]


class CloudFeedStore:
    def __init__(self, feeds_by_email: dict[str, list[Feed]] | None = None):
        self._feeds_by_email = feeds_by_email if feeds_by_email is not None else {}

    async def get_feeds(self, user: User) -> list[Feed]:
        return list(self._feeds_by_email.get(user.email, []))


class CacheFeedStore:
    def __init__(self, feeds: list[Feed] | None = None):
        self._feeds = feeds if feeds is not None else []

    async def get_feeds(self, user: User) -> list[Feed]:
        return list(self._feeds)
