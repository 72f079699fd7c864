from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field as PydField, field_serializer

from tasksync.utils.timestamps import format_rfc3339

Theme = Literal["light", "dark", "auto"]


class SettingsUpdateIn(BaseModel):
    theme: Optional[Theme] = None
    notification_time: Optional[str] = PydField(None, pattern=r"^\d{2}:\d{2}(:\d{2})?$", examples=["09:00:00"])
    language: Optional[str] = PydField(None, max_length=10)
    timezone: Optional[str] = PydField(None, max_length=50)


class SettingsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    theme: str
    notification_time: str
    language: str
    timezone: str
    sync_version: int
    created_at: datetime
    updated_at: datetime

    @field_serializer("created_at", "updated_at")
    def _rfc3339(self, value: datetime) -> Optional[str]:
        return format_rfc3339(value)
