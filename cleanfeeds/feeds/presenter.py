import weakref

from cleanfeeds.feeds.models import FeedsFetchResponse, SceneWiringError
from cleanfeeds.models import FeedsViewModel
from cleanfeeds.ports import FeedsPresenterOutput


class FeedsPresenter:
    def __init__(self):
        self._output: weakref.ReferenceType | None = None

    @property
    def output(self) -> FeedsPresenterOutput:
        output = self._output() if self._output is not None else None
        if output is None:
            raise SceneWiringError("presenter output is not bound")
        return output

    @output.setter
    def output(self, view: FeedsPresenterOutput) -> None:
        self._output = weakref.ref(view)

    def present_feeds(self, response: FeedsFetchResponse) -> None:
        output = self.output
        if response.error is not None:
            output.display_feeds_fetch_error(
                FeedsViewModel(error=str(response.error))
            )
            return

        # Feeds are displayed as-is; per-field formatting would go here.
        output.display_feeds(FeedsViewModel(feeds=list(response.feeds)))
