# =============================================================
# 🌐 SERVICE — Client HTTP de l'API Tutorials (DD Task)
# =============================================================

from pydantic import BaseModel
from dotenv import load_dotenv
from typing import Any, Dict, List, Optional, Union
import os
import logging
import requests

from models import TutorialRead

load_dotenv()
logger = logging.getLogger("frontend.service")

DEFAULT_BASE_URL = "http://localhost:8080/api/tutorials"

Payload = Union[Dict[str, Any], BaseModel]


class TutorialService:
    """
    Enveloppe typée des routes REST /api/tutorials.

    Toute réponse hors 2xx lève `requests.HTTPError` (le code reste
    disponible sur `error.response.status_code`).
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or os.getenv("TUTORIALS_API_URL") or DEFAULT_BASE_URL).rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout if timeout is not None else float(os.getenv("TUTORIALS_API_TIMEOUT", "10"))

    # --------- Plomberie ---------
    def _request(self, method: str, url: str, **kwargs) -> Any:
        response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        if response.status_code >= 400:
            logger.warning(f"{method} {url} -> {response.status_code}")
        response.raise_for_status()
        if not response.content:
            return {}
        return response.json()

    def _url(self, tutorial_id: Optional[str] = None) -> str:
        if tutorial_id is None:
            return self.base_url
        return f"{self.base_url}/{tutorial_id}"

    @staticmethod
    def _body(data: Payload) -> Dict[str, Any]:
        if isinstance(data, BaseModel):
            return data.model_dump(mode="json", exclude_none=True)
        return dict(data)

    # --------- Endpoints ---------
    def get_all(self) -> List[TutorialRead]:
        return [TutorialRead.model_validate(t) for t in self._request("GET", self._url())]

    def get(self, tutorial_id: str) -> TutorialRead:
        return TutorialRead.model_validate(self._request("GET", self._url(tutorial_id)))

    def create(self, data: Payload) -> TutorialRead:
        return TutorialRead.model_validate(self._request("POST", self._url(), json=self._body(data)))

    def update(self, tutorial_id: str, data: Payload) -> Dict[str, Any]:
        return self._request("PUT", self._url(tutorial_id), json=self._body(data))

    def delete(self, tutorial_id: str) -> Dict[str, Any]:
        return self._request("DELETE", self._url(tutorial_id))

    def delete_all(self) -> Dict[str, Any]:
        return self._request("DELETE", self._url())

    def find_by_title(self, title: str) -> List[TutorialRead]:
        return [
            TutorialRead.model_validate(t)
            for t in self._request("GET", self._url(), params={"title": title})
        ]

    def get_published(self) -> List[TutorialRead]:
        return [TutorialRead.model_validate(t) for t in self._request("GET", self._url("published"))]
