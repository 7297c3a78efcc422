# =============================================================
# 🧭 ROUTING — Table des routes côté client (DD Task)
# =============================================================

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import logging

logger = logging.getLogger("frontend.routing")

APP_TITLE = "DD Task"


@dataclass(frozen=True)
class Route:
    path: str
    component: Optional[str] = None
    redirect_to: Optional[str] = None
    path_match: str = "prefix"

    def match(self, segments: List[str]) -> Optional[Dict[str, str]]:
        pattern = [s for s in self.path.split("/") if s]
        if self.path_match == "full" or pattern:
            if len(pattern) != len(segments):
                return None
        params: Dict[str, str] = {}
        for expected, actual in zip(pattern, segments):
            if expected.startswith(":"):
                params[expected[1:]] = actual
            elif expected != actual:
                return None
        return params


ROUTES: List[Route] = [
    Route(path="", redirect_to="tutorials", path_match="full"),
    Route(path="tutorials", component="TutorialsList"),
    Route(path="tutorials/:id", component="TutorialDetails"),
    Route(path="add", component="AddTutorial"),
]


def _segments(path: str) -> List[str]:
    return [s for s in path.split("?")[0].split("/") if s]


def resolve(path: str, routes: List[Route] = ROUTES) -> Optional[Tuple[Route, Dict[str, str]]]:
    """Retourne la route atteinte (redirections suivies) et ses paramètres."""
    seen = set()
    while True:
        segments = _segments(path)
        for route in routes:
            params = route.match(segments)
            if params is None:
                continue
            if route.redirect_to is None:
                return route, params
            path = route.redirect_to
            break
        else:
            return None
        if path in seen:
            raise ValueError(f"Redirect loop on '{path}'")
        seen.add(path)


class Navigator:
    """Mémorise le chemin courant ; les composants l'appellent pour naviguer."""

    def __init__(self, path: str = ""):
        self.path = "/"
        self.history: List[str] = []
        self.navigate(path)

    def navigate(self, path: str) -> Optional[Tuple[Route, Dict[str, str]]]:
        resolved = resolve(path)
        if resolved is None:
            logger.warning(f"No route matches '{path}'")
            return None
        route, params = resolved
        target = "/" + route.path
        for name, value in params.items():
            target = target.replace(f":{name}", value)
        self.path = target
        self.history.append(target)
        return resolved
