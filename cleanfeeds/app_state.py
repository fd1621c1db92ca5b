from typing import NamedTuple

from cleanfeeds.feeds.interactor import WorkerFactory
from cleanfeeds.models import FeedsFetchRequest


class AppState(NamedTuple):
    worker_factory: WorkerFactory
    load_request: FeedsFetchRequest
