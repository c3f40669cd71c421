from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field as PydField


# ---------- IN / UPDATE ----------

class TutorialCreateIn(BaseModel):
    # Optionnel ici : la règle "titre obligatoire" est appliquée par le service (réponse 400, pas 422)
    title: Optional[str] = PydField(None, description="Titre du tutoriel", examples=["FastAPI en 10 minutes"])
    description: Optional[str] = PydField(None, examples=["Un CRUD complet avec SQLModel"])
    published: Optional[bool] = PydField(None, description="false si absent")


class TutorialUpdateIn(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None


# ---------- OUT ----------

class TutorialOut(BaseModel):
    id: int
    title: str
    description: Optional[str] = None
    published: bool
    created_at: Optional[datetime] = PydField(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = PydField(None, serialization_alias="updatedAt")

    model_config = {"from_attributes": True}


class MessageOut(BaseModel):
    message: str
