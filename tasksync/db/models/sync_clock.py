from sqlalchemy import BigInteger
from sqlmodel import Field, SQLModel


class SyncClock(SQLModel, table=True):
    """Dernière version de synchro attribuée à un owner (compteur monotone, verrouillé par ligne)."""

    __tablename__ = "sync_clock"

    owner_id: int = Field(primary_key=True, foreign_key="user.id")
    version: int = Field(default=0, sa_type=BigInteger)
