"""
➡️ But : Définir la structure des tables de la base (ORM).

Contient les classes héritant de SQLModel (ou Base de SQLAlchemy).

Représente les objets persistés. Ici on représente les propriétés communes de toutes les tables,
et celles des entités synchronisées (owner, soft delete, version de synchro).

Chaque champ = une colonne SQL (avec type, index, clé primaire...).

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Facile à migrer vers PostgreSQL ou MySQL plus tard.
"""

from sqlalchemy import BigInteger, DateTime
from sqlmodel import SQLModel, Field
from typing import Any, Optional

from pydantic import NaiveDatetime

from tasksync.utils.timestamps import utcnow


def utc_field(**kwargs: Any) -> Any:
    """Colonne DateTime sans fuseau : les heures sont stockées en UTC naïf."""
    return Field(sa_type=DateTime(timezone=False), **kwargs)


class BaseModelDB(SQLModel, table=False):
    id: Optional[int] = Field(default=None, primary_key=True)
    created_at: NaiveDatetime = utc_field(default_factory=utcnow)
    updated_at: NaiveDatetime = utc_field(default_factory=utcnow)


class VersionedModelDB(BaseModelDB, table=False):
    """
    Entité synchronisable : appartient à un owner (immuable), n'est jamais
    supprimée physiquement, et reçoit une nouvelle sync_version à chaque écriture.
    """
    owner_id: int = Field(foreign_key="user.id", index=True, nullable=False)
    is_deleted: bool = Field(default=False, index=True)
    sync_version: int = Field(default=0, sa_type=BigInteger, index=True)
