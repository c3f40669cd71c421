"""
➡️ But : Contenir la logique métier des tutoriels : valider, construire les filtres, appliquer les mises à jour partielles.

TutorialService ne connaît ni HTTP ni SQL :

lève TutorialValidationError si le titre manque à la création,

laisse remonter StoreError (couche repository),

renvoie un MutationOutcome explicite pour update/delete ("pas trouvé" n'est pas une erreur).

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import enum
import logging
from typing import List, Optional

from app.db.models.tutorials import Tutorial
from app.db.repositories.tutorials import TutorialRepository
from app.features.tutorials.schemas import TutorialCreateIn, TutorialUpdateIn

logger = logging.getLogger(__name__)


class TutorialValidationError(Exception):
    pass


class MutationOutcome(enum.Enum):
    DONE = "done"
    NOT_FOUND = "not_found"


class TutorialService:
    def __init__(self, repo: TutorialRepository):
        self.repo = repo

    # -------- Create --------

    def create(self, payload: TutorialCreateIn) -> Tutorial:
        if not payload.title:
            raise TutorialValidationError("Content can not be empty!")
        return self.repo.create(
            title=payload.title,
            description=payload.description,
            published=bool(payload.published),
        )

    # -------- Reads --------

    def find_all(self, title: Optional[str] = None) -> List[Tutorial]:
        # titre vide = pas de filtre
        if title:
            return self.repo.find_by_title(title)
        return self.repo.find_all()

    def find_one(self, tutorial_id: int) -> Optional[Tutorial]:
        return self.repo.get(tutorial_id)

    def find_all_published(self) -> List[Tutorial]:
        return self.repo.find_published()

    # -------- Update --------

    @staticmethod
    def _changes(payload: TutorialUpdateIn) -> dict:
        """Seuls les champs envoyés par le client ; titre et published jamais remis à vide/NULL."""
        changes = payload.model_dump(exclude_unset=True)
        if not changes.get("title"):
            changes.pop("title", None)
        if changes.get("published") is None:
            changes.pop("published", None)
        return changes

    def update(self, tutorial_id: int, payload: TutorialUpdateIn) -> MutationOutcome:
        changes = self._changes(payload)
        if not changes:
            return MutationOutcome.NOT_FOUND
        affected = self.repo.update_by_id(tutorial_id, **changes)
        return MutationOutcome.DONE if affected == 1 else MutationOutcome.NOT_FOUND

    # -------- Delete --------

    def delete(self, tutorial_id: int) -> MutationOutcome:
        affected = self.repo.destroy_by_id(tutorial_id)
        return MutationOutcome.DONE if affected == 1 else MutationOutcome.NOT_FOUND

    def delete_all(self) -> int:
        removed = self.repo.destroy_all()
        logger.info("Deleted %d tutorials", removed)
        return removed
