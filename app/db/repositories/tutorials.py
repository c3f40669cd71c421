# app/db/repositories/tutorials.py
from typing import List

from app.db.repositories.base import BaseRepository
from app.db.models.tutorials import Tutorial


class TutorialRepository(BaseRepository[Tutorial]):
    """CRUD Tutorials + filtres titre / publiés."""
    model = Tutorial

    def find_by_title(self, title: str) -> List[Tutorial]:
        """
        Recherche par sous-chaîne sur le titre (LIKE '%title%').
        Les jokers saisis par le client (%, _) sont échappés : ils matchent littéralement.
        La sensibilité à la casse dépend du backend (insensible en ASCII sous SQLite).
        """
        return self.find_all(Tutorial.title.contains(title, autoescape=True))

    def find_published(self) -> List[Tutorial]:
        return self.find_all(Tutorial.published.is_(True))
