"""Assembly of the feeds scene object graph."""

import structlog

from cleanfeeds.config import Settings
from cleanfeeds.feeds.data_manager import FeedsDataManager
from cleanfeeds.feeds.interactor import FeedsInteractor, WorkerFactory
from cleanfeeds.feeds.presenter import FeedsPresenter
from cleanfeeds.feeds.scene_router import FeedsRouter
from cleanfeeds.feeds.sources import CacheFeedStore, CloudFeedStore, RemoteFeedSource
from cleanfeeds.feeds.view import FeedsView
from cleanfeeds.feeds.worker import FeedsWorker
from cleanfeeds.ports import FeedsDataSource

logger = structlog.get_logger(__name__)


def configure(view: FeedsView, worker_factory: WorkerFactory = FeedsWorker) -> FeedsView:
    """Wire a router, presenter and interactor around a freshly created view.

    The router and presenter hold the view weakly; the view owns the
    interactor and router, and the interactor owns the presenter.
    """
    router = FeedsRouter(view)

    presenter = FeedsPresenter()
    presenter.output = view

    interactor = FeedsInteractor(worker_factory)
    interactor.output = presenter

    view.output = interactor
    view.router = router
    logger.debug("feeds_scene_configured", view_id=id(view))
    return view


def make_data_source(settings: Settings) -> FeedsDataSource:
    if settings.data_source == "remote":
        return RemoteFeedSource(
            settings.feed_url, settings.fetch_timeout, settings.max_feeds
        )
    if settings.data_source == "cloud":
        return CloudFeedStore()
    if settings.data_source == "cache":
        return CacheFeedStore()
    raise ValueError(f"unknown data source: {settings.data_source!r}")


def make_worker_factory(settings: Settings) -> WorkerFactory:
    data_source = make_data_source(settings)

    def worker_factory() -> FeedsWorker:
        return FeedsWorker(FeedsDataManager(data_source))

    return worker_factory
