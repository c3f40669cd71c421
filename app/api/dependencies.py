"""
➡️ But : Centraliser les dépendances réutilisables des routes.

get_tutorial_repository() : crée un TutorialRepository à partir d'une session DB.

get_tutorial_service() : crée un TutorialService à partir du repository.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Chaque maillon (session, repository, service) est remplaçable en test via app.dependency_overrides.
"""

from fastapi import Depends
from sqlmodel import Session

from app.db.session import get_session
from app.db.repositories.tutorials import TutorialRepository
from app.features.tutorials.services import TutorialService


# -----------------------------
# Repositories
# -----------------------------
def get_tutorial_repository(session: Session = Depends(get_session)) -> TutorialRepository:
    return TutorialRepository(session)


# -----------------------------
# Tutorial service
# -----------------------------
def get_tutorial_service(
    repo: TutorialRepository = Depends(get_tutorial_repository),
) -> TutorialService:
    return TutorialService(repo=repo)
