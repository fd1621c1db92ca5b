import logging
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cleanfeeds.app_state import AppState
from cleanfeeds.config import Settings
from cleanfeeds.feeds.configurator import make_worker_factory
from cleanfeeds.models import FeedsFetchRequest
from cleanfeeds.routers.feeds import router as feeds_router

settings = Settings()

logging.basicConfig(level=settings.log_level.upper())
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.app_state = AppState(
        worker_factory=make_worker_factory(settings),
        load_request=FeedsFetchRequest(
            email=settings.default_email, password=settings.default_password
        ),
    )
    logger.info("feeds_scene_ready", data_source=settings.data_source)
    yield


app = FastAPI(title="Clean Feeds API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(feeds_router)


if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
