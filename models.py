# =============================================================
# 🧱 MODELS — Schémas de données SQLModel (DD Task)
# =============================================================

from sqlmodel import SQLModel, Field
from pydantic import field_validator
from typing import Optional
from datetime import datetime, timezone
from sqlalchemy import DateTime
import uuid


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


# -------------------------------------------------------------
# 📘 Modèle Tutorial
# -------------------------------------------------------------
class TutorialBase(SQLModel):
    title: str = ""
    description: str = ""
    published: bool = False


class Tutorial(TutorialBase, table=True):
    id: str = Field(default_factory=_new_id, primary_key=True, max_length=32)
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))


# -------------------------------------------------------------
# 📨 Schémas d'entrée / sortie de l'API
# -------------------------------------------------------------
class TutorialCreate(SQLModel):
    # Titre absent ou null : refusé par la route avec un 400
    title: Optional[str] = None
    description: str = ""
    published: bool = False


class TutorialUpdate(SQLModel):
    title: Optional[str] = None
    description: Optional[str] = None
    published: Optional[bool] = None


class TutorialRead(TutorialBase):
    """
    Tutorial tel qu'exposé par l'API et manipulé côté client.

    L'id reste optionnel : un formulaire de création n'en a pas encore.
    Les valeurs nulles reprennent les valeurs par défaut.
    """
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("title", "description", mode="before")
    @classmethod
    def _empty_text(cls, value):
        return "" if value is None else value

    @field_validator("published", mode="before")
    @classmethod
    def _unpublished(cls, value):
        return False if value is None else value

    @field_validator("created_at", "updated_at")
    @classmethod
    def _as_utc(cls, value):
        # SQLite relit les dates sans fuseau ; elles sont stockées en UTC
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
