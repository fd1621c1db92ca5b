from cleanfeeds.feeds.models import Feed, User
from cleanfeeds.ports import FeedsDataSource


class FeedsDataManager:
    def __init__(self, data_source: FeedsDataSource):
        self._data_source = data_source

    @property
    def data_source(self) -> FeedsDataSource:
        return self._data_source

    async def fetch_feeds(self, user: User) -> list[Feed]:
        return await self._data_source.get_feeds(user)
