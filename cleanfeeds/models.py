from pydantic import BaseModel, ConfigDict, model_validator

from cleanfeeds.feeds.models import Feed


class FeedsFetchRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str | None = None
    password: str | None = None


class FeedsViewModel(BaseModel):
    feeds: list[Feed] | None = None
    error: str | None = None

    @model_validator(mode="after")
    def feeds_or_error(self) -> "FeedsViewModel":
        if (self.feeds is None) == (self.error is None):
            raise ValueError("a view model carries either feeds or an error")
        return self
