"""Navigation out of the feeds scene."""

import weakref
from dataclasses import dataclass
from typing import Any

import structlog

from cleanfeeds.feeds.models import SceneWiringError

logger = structlog.get_logger(__name__)

SHOW_SOMEWHERE_SCENE = "ShowSomewhereScene"


@dataclass
class SceneTransition:
    identifier: str
    destination: Any


class FeedsRouter:
    def __init__(self, view):
        self._view = weakref.ref(view)

    @property
    def view(self):
        view = self._view()
        if view is None:
            raise SceneWiringError("router view has been released")
        return view

    def navigate_to_somewhere(self) -> None:
        logger.info("navigation_not_configured", scene=SHOW_SOMEWHERE_SCENE)

    def pass_data_to_next_scene(self, transition: SceneTransition) -> None:
        if transition.identifier == SHOW_SOMEWHERE_SCENE:
            self.pass_data_to_somewhere_scene(transition)

    def pass_data_to_somewhere_scene(self, transition: SceneTransition) -> None:
        transition.destination.feeds = list(self.view.feeds)
