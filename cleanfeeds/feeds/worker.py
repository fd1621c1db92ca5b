"""FeedsWorker — use-case facade over the data manager."""

import structlog

from cleanfeeds.feeds.data_manager import FeedsDataManager
from cleanfeeds.feeds.models import Feed, FeedsFetchError, User
from cleanfeeds.feeds.sources import RemoteFeedSource

logger = structlog.get_logger(__name__)


class FeedsWorker:
    def __init__(self, data_manager: FeedsDataManager | None = None):
        self._data_manager = data_manager or FeedsDataManager(RemoteFeedSource())

    async def fetch_feeds(self, user: User) -> list[Feed]:
        source = type(self._data_manager.data_source).__name__
        try:
            feeds = await self._data_manager.fetch_feeds(user)
        except FeedsFetchError as exc:
            logger.warning("feeds_fetch_failed", source=source, error=exc.message)
            raise
        logger.info("feeds_fetched", source=source, count=len(feeds))
        return feeds
