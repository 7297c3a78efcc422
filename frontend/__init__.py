"""Client side of DD Task: HTTP service, screen components and route table."""

from frontend.service import TutorialService
from frontend.components import AddTutorial, TutorialDetails, TutorialsList
from frontend.routing import APP_TITLE, Navigator, ROUTES, resolve

__all__ = [
    "APP_TITLE",
    "AddTutorial",
    "Navigator",
    "ROUTES",
    "TutorialDetails",
    "TutorialService",
    "TutorialsList",
    "resolve",
]
