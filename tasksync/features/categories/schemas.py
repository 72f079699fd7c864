from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field as PydField, field_serializer

from tasksync.utils.timestamps import format_rfc3339


# ---------- IN / UPDATE ----------

class CategoryCreateIn(BaseModel):
    name: str = PydField(..., min_length=1, max_length=100, description="Nom (unique par utilisateur)")
    color: str = PydField("#2196F3", max_length=7)
    icon: str = PydField("folder", max_length=50)


class CategoryUpdateIn(BaseModel):
    name: Optional[str] = PydField(None, min_length=1, max_length=100)
    color: Optional[str] = PydField(None, max_length=7)
    icon: Optional[str] = PydField(None, max_length=50)


# ---------- OUT ----------

class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    color: str
    icon: str
    is_deleted: bool = False
    sync_version: int
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def _rfc3339(self, value: datetime) -> Optional[str]:
        return format_rfc3339(value)
