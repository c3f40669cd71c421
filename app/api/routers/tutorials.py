"""
➡️ But : Définir les endpoints de l'API /api/tutorials.

C'est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, DELETE)

Appelle le service correspondant

Traduit explicitement chaque résultat / erreur en réponse :
  - TutorialValidationError → 400
  - StoreError             → 500 (message du driver ou message de repli)
  - MutationOutcome        → 200 + message (y compris "pas trouvé", par compatibilité)

🔹 Avantages :

Automatiquement documentée dans Swagger (/api-docs).

Les routes ne contiennent ni SQL ni logique métier.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_tutorial_service
from app.db.repositories.base import StoreError
from app.features.tutorials.schemas import (
    TutorialCreateIn,
    TutorialUpdateIn,
    TutorialOut,
    MessageOut,
)
from app.features.tutorials.services import (
    TutorialService,
    TutorialValidationError,
    MutationOutcome,
)

logger = logging.getLogger(__name__)

# Bornes d'un INTEGER SQL 64 bits : au-delà, le driver lève OverflowError
MAX_ID = 2**63 - 1
MIN_ID = -(2**63)

router = APIRouter(
    prefix="/tutorials",
    tags=["tutorials"],
    responses={500: {"model": MessageOut, "description": "Server error"}},
)

# -------- Helpers --------

def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=MessageOut(message=message).model_dump())

def _store_failure(exc: StoreError, fallback: str, *, use_driver_message: bool = True) -> JSONResponse:
    logger.exception("Store error: %s", exc)
    text = exc.message if (use_driver_message and exc.message) else fallback
    return _message(status.HTTP_500_INTERNAL_SERVER_ERROR, text)


# -----------------------------
# Create
# -----------------------------
@router.post(
    "",
    summary="Create a new tutorial",
    description="Add a tutorial to the database. `published` defaults to false.",
    response_model=TutorialOut,
    responses={400: {"model": MessageOut, "description": "Content can not be empty."}},
)
def create(payload: TutorialCreateIn, svc: TutorialService = Depends(get_tutorial_service)):
    try:
        return svc.create(payload)
    except TutorialValidationError as exc:
        return _message(status.HTTP_400_BAD_REQUEST, str(exc))
    except StoreError as exc:
        return _store_failure(exc, "Some error occurred while creating the Tutorial.")


# -----------------------------
# List (optional title filter)
# -----------------------------
@router.get(
    "",
    summary="Retrieve all tutorials",
    description="Get a list of all tutorials, optionally filtered by a substring of the title.",
    response_model=List[TutorialOut],
)
def find_all(
    title: Optional[str] = Query(None, description="Title to filter by."),
    svc: TutorialService = Depends(get_tutorial_service),
):
    try:
        return svc.find_all(title)
    except StoreError as exc:
        return _store_failure(exc, "Some error occurred while retrieving tutorials.")


# -----------------------------
# Published (déclarée avant /{tutorial_id})
# -----------------------------
@router.get(
    "/published",
    summary="Retrieve all published tutorials",
    response_model=List[TutorialOut],
)
def find_all_published(svc: TutorialService = Depends(get_tutorial_service)):
    try:
        return svc.find_all_published()
    except StoreError as exc:
        return _store_failure(exc, "Some error occurred while retrieving tutorials.")


# -----------------------------
# Get by id
# -----------------------------
@router.get(
    "/{tutorial_id}",
    summary="Retrieve a single tutorial by ID",
    description="Returns the tutorial, or an empty body when no tutorial has this ID.",
    response_model=TutorialOut,
)
def find_one(
    tutorial_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    svc: TutorialService = Depends(get_tutorial_service),
):
    try:
        tutorial = svc.find_one(tutorial_id)
    except StoreError as exc:
        return _store_failure(
            exc, f"Error retrieving Tutorial with id={tutorial_id}", use_driver_message=False
        )
    if tutorial is None:
        # corps vide, statut 200 (comportement historique)
        return Response(status_code=status.HTTP_200_OK)
    return tutorial


# -----------------------------
# Update (partiel)
# -----------------------------
@router.put(
    "/{tutorial_id}",
    summary="Update a tutorial",
    description="Only the fields sent in the body are replaced.",
    response_model=MessageOut,
)
def update(
    payload: TutorialUpdateIn,
    tutorial_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    svc: TutorialService = Depends(get_tutorial_service),
):
    try:
        outcome = svc.update(tutorial_id, payload)
    except StoreError as exc:
        return _store_failure(
            exc, f"Error updating Tutorial with id={tutorial_id}", use_driver_message=False
        )
    if outcome is MutationOutcome.DONE:
        return MessageOut(message="Tutorial was updated successfully.")
    return MessageOut(
        message=f"Cannot update Tutorial with id={tutorial_id}. Maybe Tutorial was not found or req.body is empty!"
    )


# -----------------------------
# Delete by id
# -----------------------------
@router.delete(
    "/{tutorial_id}",
    summary="Delete a tutorial",
    response_model=MessageOut,
)
def delete(
    tutorial_id: int = Path(..., ge=MIN_ID, le=MAX_ID),
    svc: TutorialService = Depends(get_tutorial_service),
):
    try:
        outcome = svc.delete(tutorial_id)
    except StoreError as exc:
        return _store_failure(
            exc, f"Could not delete Tutorial with id={tutorial_id}", use_driver_message=False
        )
    if outcome is MutationOutcome.DONE:
        return MessageOut(message="Tutorial was deleted successfully!")
    return MessageOut(message=f"Cannot delete Tutorial with id={tutorial_id}. Maybe Tutorial was not found!")


# -----------------------------
# Delete all
# -----------------------------
@router.delete(
    "",
    summary="Delete all tutorials",
    response_model=MessageOut,
)
def delete_all(svc: TutorialService = Depends(get_tutorial_service)):
    try:
        removed = svc.delete_all()
    except StoreError as exc:
        return _store_failure(exc, "Some error occurred while removing all tutorials.")
    return MessageOut(message=f"{removed} Tutorials were deleted successfully!")
