from sqlalchemy import Index, text
from sqlmodel import Field

from .base import VersionedModelDB


class Category(VersionedModelDB, table=True):
    """Catégories d'un utilisateur ; le nom est unique par owner parmi les lignes non supprimées."""

    __table_args__ = (
        Index(
            "uq_category_owner_name_active",
            "owner_id",
            "name",
            unique=True,
            sqlite_where=text("is_deleted = 0"),
            postgresql_where=text("is_deleted = false"),
        ),
    )

    name: str = Field(max_length=100, description="Nom de la catégorie (ex: 'Travail', 'Perso')")
    color: str = Field(default="#2196F3", max_length=7)
    icon: str = Field(default="folder", max_length=50)
