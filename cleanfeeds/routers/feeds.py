from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from cleanfeeds.app_state import AppState
from cleanfeeds.feeds.configurator import configure
from cleanfeeds.feeds.view import FeedsView
from cleanfeeds.models import FeedsFetchRequest

router = APIRouter(prefix="/api/v1")


def get_app_state(request: Request) -> AppState:
    return request.app.state.app_state


def render(view: FeedsView) -> JSONResponse:
    headers = {}
    if view.view_model.error is not None:
        headers["X-Feed-Errors"] = "fetch-failed"
    return JSONResponse(content=view.view_model.model_dump(mode="json"), headers=headers)


@router.get("/feeds")
async def get_feeds(state: AppState = Depends(get_app_state)):
    view = configure(FeedsView(state.load_request), state.worker_factory)
    await view.load()
    return render(view)


@router.post("/feeds")
async def post_feeds(
    body: FeedsFetchRequest, state: AppState = Depends(get_app_state)
):
    view = configure(FeedsView(), state.worker_factory)
    await view.fetch_feeds(body)
    return render(view)
