from dataclasses import dataclass


@dataclass(frozen=True)
class Feed:
    title: str
    author: str
    published_on: str


@dataclass(frozen=True)
class User:
    email: str
    password: str


class FeedsFetchError(Exception):
    """Base class for failures reported back to the view as data."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CannotFetchError(FeedsFetchError):
    pass


class InvalidFeedsRequestError(FeedsFetchError):
    pass


class SceneWiringError(RuntimeError):
    pass


@dataclass
class FeedsFetchResponse:
    feeds: list[Feed] | None = None
    error: FeedsFetchError | None = None

    def __post_init__(self):
        if (self.feeds is None) == (self.error is None):
            raise ValueError("exactly one of feeds or error must be set")
