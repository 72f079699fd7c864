"""
➡️ But : Définir les formats d'entrée/sortie de l'API todos (couche validation).

TodoCreateIn → corps de requête POST

TodoUpdateIn → corps PATCH (tous les champs optionnels)

TodoOut → réponse de l'API

Les dates (due_date, reminder) arrivent en chaîne RFC3339 : une chaîne illisible
est traitée comme un champ absent, pas comme une erreur. La priorité hors 0–3
est refusée (422).
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field as PydField, field_serializer

from tasksync.utils.timestamps import format_rfc3339


# ---------- IN / UPDATE ----------

class TodoCreateIn(BaseModel):
    title: str = PydField(..., min_length=1, max_length=200, description="Titre de la tâche")
    description: str = ""
    completed: bool = False
    priority: int = PydField(0, ge=0, le=3, description="0=low, 1=medium, 2=high, 3=urgent")
    due_date: Optional[str] = PydField(None, examples=["2025-01-31T18:00:00Z"])
    tags: List[str] = PydField(default_factory=list)
    category_id: Optional[int] = None
    reminder: Optional[str] = None


class TodoUpdateIn(BaseModel):
    title: Optional[str] = PydField(None, min_length=1, max_length=200)
    description: Optional[str] = None
    completed: Optional[bool] = None
    priority: Optional[int] = PydField(None, ge=0, le=3)
    due_date: Optional[str] = None
    tags: Optional[List[str]] = None
    category_id: Optional[int] = None
    reminder: Optional[str] = None


# ---------- OUT ----------

class TodoOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str
    completed: bool
    priority: int
    due_date: Optional[datetime] = None
    tags: List[str] = PydField(default_factory=list)
    category_id: Optional[int] = None
    reminder: Optional[datetime] = None
    is_deleted: bool = False
    sync_version: int
    created_at: datetime
    updated_at: datetime

    @field_serializer("due_date", "reminder", "created_at", "updated_at")
    def _rfc3339(self, value: Optional[datetime]) -> Optional[str]:
        return format_rfc3339(value)


class TodoPage(BaseModel):
    items: List[TodoOut]
    total: int
    page: int
    size: int
