"""Shared fixtures for the feeds scene unit tests."""

import pytest

from cleanfeeds.feeds.models import Feed, User


@pytest.fixture
def sample_feeds() -> list[Feed]:
    """Three feeds in a fixed order."""
    return [
        Feed(title="T", author="A", published_on="2020-01-01"),
        Feed(title="Swift 4", author="Chris", published_on="2017-06-05"),
        Feed(title="Core ML", author="Ada", published_on="2017-06-06"),
    ]


@pytest.fixture
def user() -> User:
    return User(email="a@b.com", password="x")
