# =============================================================
# 🧩 COMPONENTS — État des écrans liste / détails / ajout (DD Task)
# =============================================================

from typing import List, Optional
import logging
import requests

from models import TutorialRead
from frontend.routing import Navigator
from frontend.service import TutorialService

logger = logging.getLogger("frontend.components")


# -------------------------------------------------------------
# ➕ AJOUT D'UN TUTORIEL
# -------------------------------------------------------------
class AddTutorial:
    def __init__(self, service: TutorialService):
        self.service = service
        self.tutorial = TutorialRead()
        self.submitted = False

    def save_tutorial(self) -> None:
        data = {"title": self.tutorial.title, "description": self.tutorial.description}
        try:
            created = self.service.create(data)
        except requests.RequestException as e:
            logger.error(f"❌ Error creating tutorial: {e}")
            return
        logger.info(f"Tutorial created: {created.id}")
        self.tutorial = created
        self.submitted = True

    def new_tutorial(self) -> None:
        self.submitted = False
        self.tutorial = TutorialRead()


# -------------------------------------------------------------
# ✏️ DÉTAILS / ÉDITION
# -------------------------------------------------------------
class TutorialDetails:
    """
    Affiche un tutoriel et permet de le modifier.

    En `view_mode`, le composant est embarqué dans la liste et reçoit
    `current_tutorial` de son parent au lieu de le charger.
    """

    def __init__(
        self,
        service: TutorialService,
        navigator: Optional[Navigator] = None,
        view_mode: bool = False,
        current_tutorial: Optional[TutorialRead] = None,
    ):
        self.service = service
        self.navigator = navigator or Navigator()
        self.view_mode = view_mode
        self.current_tutorial = current_tutorial or TutorialRead()
        self.message = ""

    def init(self, tutorial_id: Optional[str] = None) -> None:
        if not self.view_mode:
            self.message = ""
            if tutorial_id is not None:
                self.get_tutorial(tutorial_id)

    def get_tutorial(self, tutorial_id: str) -> None:
        try:
            self.current_tutorial = self.service.get(tutorial_id)
        except requests.RequestException as e:
            logger.error(f"❌ Error loading tutorial {tutorial_id}: {e}")

    def update_published(self, status: bool) -> None:
        data = {
            "title": self.current_tutorial.title,
            "description": self.current_tutorial.description,
            "published": status,
        }
        self.message = ""
        try:
            res = self.service.update(self.current_tutorial.id, data)
        except requests.RequestException as e:
            logger.error(f"❌ Error updating status: {e}")
            return
        self.current_tutorial.published = status
        self.message = res.get("message") or "The status was updated successfully!"

    def update_tutorial(self) -> None:
        self.message = ""
        try:
            res = self.service.update(self.current_tutorial.id, self.current_tutorial)
        except requests.RequestException as e:
            logger.error(f"❌ Error updating tutorial: {e}")
            return
        self.message = res.get("message") or "This tutorial was updated successfully!"

    def delete_tutorial(self) -> None:
        try:
            self.service.delete(self.current_tutorial.id)
        except requests.RequestException as e:
            logger.error(f"❌ Error deleting tutorial: {e}")
            return
        self.navigator.navigate("/tutorials")


# -------------------------------------------------------------
# 📖 LISTE DES TUTORIELS
# -------------------------------------------------------------
class TutorialsList:
    def __init__(self, service: TutorialService):
        self.service = service
        self.tutorials: List[TutorialRead] = []
        self.current_tutorial: Optional[TutorialRead] = None
        self.current_index = -1
        self.title = ""

    def init(self) -> None:
        self.retrieve_tutorials()

    def retrieve_tutorials(self) -> None:
        try:
            self.tutorials = self.service.get_all()
        except requests.RequestException as e:
            logger.error(f"❌ Error retrieving tutorials: {e}")

    def refresh_list(self) -> None:
        self.retrieve_tutorials()
        self.current_tutorial = None
        self.current_index = -1

    def set_active_tutorial(self, tutorial: TutorialRead, index: int) -> None:
        self.current_tutorial = tutorial
        self.current_index = index

    def remove_all_tutorials(self) -> None:
        try:
            res = self.service.delete_all()
        except requests.RequestException as e:
            logger.error(f"❌ Error removing tutorials: {e}")
            return
        logger.info(res.get("message", ""))
        self.refresh_list()

    def search_title(self) -> None:
        self.current_tutorial = None
        self.current_index = -1
        try:
            self.tutorials = self.service.find_by_title(self.title)
        except requests.RequestException as e:
            logger.error(f"❌ Error searching tutorials: {e}")

    def details(self) -> Optional[TutorialDetails]:
        """Panneau de détails embarqué pour le tutoriel sélectionné."""
        if self.current_tutorial is None:
            return None
        return TutorialDetails(self.service, view_mode=True, current_tutorial=self.current_tutorial)
