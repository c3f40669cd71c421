from typing import Optional
from sqlmodel import Field

from .base import BaseModelDB


class Tutorial(BaseModelDB, table=True):
    """Tutoriels : titre obligatoire, description libre, statut de publication."""

    title: str = Field(index=True, min_length=1, description="Titre du tutoriel")
    description: Optional[str] = Field(default=None, description="Description du tutoriel")

    # Jamais NULL une fois persisté
    published: bool = Field(default=False, nullable=False, description="Le tutoriel est-il publié ?")
