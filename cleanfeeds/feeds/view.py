"""FeedsView — headless view that keeps the last rendered state."""

import structlog

from cleanfeeds.config import Settings
from cleanfeeds.feeds.models import Feed, SceneWiringError
from cleanfeeds.feeds.scene_router import FeedsRouter, SceneTransition
from cleanfeeds.models import FeedsFetchRequest, FeedsViewModel
from cleanfeeds.ports import FeedsInteractorInput

logger = structlog.get_logger(__name__)

LOAD_REQUEST = FeedsFetchRequest(
    email=Settings.model_fields["default_email"].default,
    password=Settings.model_fields["default_password"].default,
)


class FeedsView:
    def __init__(self, load_request: FeedsFetchRequest | None = None):
        self._load_request = load_request or LOAD_REQUEST
        self.output: FeedsInteractorInput | None = None
        self.router: FeedsRouter | None = None
        self.feeds: list[Feed] = []
        self.error: str | None = None
        self.view_model: FeedsViewModel | None = None

    async def load(self) -> None:
        await self.fetch_feeds_on_load()

    async def fetch_feeds_on_load(self) -> None:
        await self.fetch_feeds(self._load_request)

    async def fetch_feeds(self, request: FeedsFetchRequest) -> None:
        if self.output is None:
            raise SceneWiringError("view is not configured")
        await self.output.fetch_feeds(request)

    def display_feeds(self, view_model: FeedsViewModel) -> None:
        self.view_model = view_model
        if view_model.feeds is not None:
            self.refresh(view_model.feeds)

    def display_feeds_fetch_error(self, view_model: FeedsViewModel) -> None:
        self.view_model = view_model
        if view_model.error is not None:
            logger.warning("feeds_display_error", error=view_model.error)
            self.error = view_model.error

    def refresh(self, feeds: list[Feed]) -> None:
        self.feeds = list(feeds)
        self.error = None

    def prepare_for_transition(self, transition: SceneTransition) -> None:
        if self.router is None:
            raise SceneWiringError("view is not configured")
        self.router.pass_data_to_next_scene(transition)
