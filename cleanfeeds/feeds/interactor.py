"""FeedsInteractor, the "fetch feeds for a user" use case."""

from collections.abc import Callable

import structlog

from cleanfeeds.feeds.models import (
    FeedsFetchError,
    FeedsFetchResponse,
    InvalidFeedsRequestError,
    SceneWiringError,
    User,
)
from cleanfeeds.feeds.worker import FeedsWorker
from cleanfeeds.models import FeedsFetchRequest
from cleanfeeds.ports import FeedsInteractorOutput

logger = structlog.get_logger(__name__)

WorkerFactory = Callable[[], FeedsWorker]


def make_user(request: FeedsFetchRequest) -> User:
    """Build a User from a fetch request.

    Raises:
        InvalidFeedsRequestError: If email or password is missing or empty.
    """
    missing = [
        name for name in ("email", "password") if not getattr(request, name)
    ]
    if missing:
        raise InvalidFeedsRequestError(f"missing {' and '.join(missing)}")
    return User(email=request.email, password=request.password)


class FeedsInteractor:
    def __init__(self, worker_factory: WorkerFactory = FeedsWorker):
        self._worker_factory = worker_factory
        self.output: FeedsInteractorOutput | None = None

    async def fetch_feeds(self, request: FeedsFetchRequest) -> None:
        if self.output is None:
            raise SceneWiringError("interactor output is not bound")

        try:
            user = make_user(request)
            worker = self._worker_factory()
            feeds = await worker.fetch_feeds(user)
        except InvalidFeedsRequestError as exc:
            logger.info("feeds_request_rejected", reason=exc.message)
            response = FeedsFetchResponse(error=exc)
        except FeedsFetchError as exc:
            response = FeedsFetchResponse(error=exc)
        else:
            response = FeedsFetchResponse(feeds=feeds)

        self.output.present_feeds(response)
