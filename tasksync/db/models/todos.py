"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les tâches (Todo). Les tags sont une liste ordonnée de chaînes, sérialisée
en colonne JSON par SQLAlchemy (couche persistance) : l'entité ne manipule qu'une list[str].
"""

from enum import IntEnum
from typing import List, Optional

from pydantic import NaiveDatetime
from sqlalchemy import JSON
from sqlmodel import Field

from .base import VersionedModelDB, utc_field


class Priority(IntEnum):
    """Priorité d'une tâche, avec mapping entier explicite (stocké tel quel)."""
    LOW = 0
    MEDIUM = 1
    HIGH = 2
    URGENT = 3


class Todo(VersionedModelDB, table=True):
    title: str = Field(index=True, max_length=200)
    description: str = ""
    completed: bool = Field(default=False, index=True)
    priority: int = Field(default=0, ge=0, le=3)  # voir Priority
    due_date: Optional[NaiveDatetime] = utc_field(default=None)
    tags: List[str] = Field(default_factory=list, sa_type=JSON)
    category_id: Optional[int] = Field(default=None, foreign_key="category.id", index=True)
    reminder: Optional[NaiveDatetime] = utc_field(default=None)
