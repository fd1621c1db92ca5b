from typing import Protocol

from cleanfeeds.feeds.models import Feed, FeedsFetchResponse, User
from cleanfeeds.models import FeedsFetchRequest, FeedsViewModel


class FeedsDataSource(Protocol):
    async def get_feeds(self, user: User) -> list[Feed]: ...


class FeedsInteractorInput(Protocol):
    async def fetch_feeds(self, request: FeedsFetchRequest) -> None: ...


class FeedsInteractorOutput(Protocol):
    def present_feeds(self, response: FeedsFetchResponse) -> None: ...


class FeedsPresenterOutput(Protocol):
    def display_feeds(self, view_model: FeedsViewModel) -> None: ...

    def display_feeds_fetch_error(self, view_model: FeedsViewModel) -> None: ...