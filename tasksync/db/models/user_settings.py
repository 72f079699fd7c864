from pydantic import NaiveDatetime
from sqlalchemy import BigInteger
from sqlmodel import Field, SQLModel

from tasksync.db.models.base import utc_field
from tasksync.utils.timestamps import utcnow


class UserSettings(SQLModel, table=True):
    """Réglages personnels : une seule ligne par owner (l'owner est la clé primaire)."""

    __tablename__ = "user_settings"

    owner_id: int = Field(primary_key=True, foreign_key="user.id")
    theme: str = Field(default="light", max_length=10)   # light | dark | auto
    notification_time: str = Field(default="09:00:00", max_length=8)
    language: str = Field(default="zh-CN", max_length=10)
    timezone: str = Field(default="Asia/Shanghai", max_length=50)
    created_at: NaiveDatetime = utc_field(default_factory=utcnow)
    updated_at: NaiveDatetime = utc_field(default_factory=utcnow)
    sync_version: int = Field(default=0, sa_type=BigInteger, index=True)
