"""Tests for feed domain data models."""

import dataclasses

import pytest

from cleanfeeds.feeds.models import (
    CannotFetchError,
    Feed,
    FeedsFetchError,
    FeedsFetchResponse,
    InvalidFeedsRequestError,
    SceneWiringError,
    User,
)


class TestFeed:
    def test_feed_creation(self):
        """Feed dataclass should store title, author and published_on."""
        feed = Feed(title="T", author="A", published_on="2020-01-01")
        assert feed.title == "T"
        assert feed.author == "A"
        assert feed.published_on == "2020-01-01"

    def test_feeds_compare_structurally(self):
        """Two feeds with the same fields are equal."""
        assert Feed("T", "A", "2020-01-01") == Feed("T", "A", "2020-01-01")
        assert Feed("T", "A", "2020-01-01") != Feed("T", "B", "2020-01-01")

    def test_feed_is_immutable(self):
        """Feed fields cannot be reassigned after construction."""
        feed = Feed("T", "A", "2020-01-01")
        with pytest.raises(dataclasses.FrozenInstanceError):
            feed.title = "changed"

    def test_user_is_immutable(self):
        user = User(email="a@b.com", password="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            user.email = "other@b.com"


class TestFeedsFetchResponse:
    def test_feeds_only_is_valid(self):
        response = FeedsFetchResponse(feeds=[])
        assert response.feeds == []
        assert response.error is None

    def test_error_only_is_valid(self):
        error = CannotFetchError("offline")
        response = FeedsFetchResponse(error=error)
        assert response.error is error
        assert response.feeds is None

    def test_neither_raises(self):
        """A response must carry feeds or an error."""
        with pytest.raises(ValueError, match="exactly one"):
            FeedsFetchResponse()

    def test_both_raises(self):
        """A response cannot carry feeds and an error at once."""
        with pytest.raises(ValueError, match="exactly one"):
            FeedsFetchResponse(feeds=[], error=CannotFetchError("offline"))


class TestErrors:
    def test_variants_are_feeds_fetch_errors(self):
        assert issubclass(CannotFetchError, FeedsFetchError)
        assert issubclass(InvalidFeedsRequestError, FeedsFetchError)

    def test_message_is_kept(self):
        error = CannotFetchError("server unreachable")
        assert error.message == "server unreachable"
        assert str(error) == "server unreachable"

    def test_scene_wiring_error_is_not_a_fetch_error(self):
        """Wiring mistakes must never be reported to the view as data."""
        assert issubclass(SceneWiringError, RuntimeError)
        assert not issubclass(SceneWiringError, FeedsFetchError)
