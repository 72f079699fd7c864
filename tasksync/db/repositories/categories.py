"""
➡️ But : Encapsuler toutes les opérations de base de données.

CategoryRepository : CRUD scopé par owner sur la table Category.

Traduit la violation d'unicité (owner, name) en DuplicateNameError pour que
le service puisse renvoyer un message clair au lieu d'une erreur interne.
"""

from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from tasksync.core.errors import DuplicateNameError
from tasksync.db.models.categories import Category
from tasksync.db.repositories.versioned import VersionedRepository


class CategoryRepository(VersionedRepository[Category]):
    model = Category

    def list_active(self, owner_id: int) -> Sequence[Category]:
        """Catégories non supprimées du owner, par ordre de création."""
        stmt = (
            select(Category)
            .where(Category.owner_id == owner_id, Category.is_deleted.is_(False))
            .order_by(Category.created_at.asc(), Category.id.asc())
        )
        return self.session.exec(stmt).all()

    def exists_active_name(self, owner_id: int, name: str, *, exclude_id: Optional[int] = None) -> bool:
        """Vérifie si le nom est déjà pris par une autre catégorie non supprimée du owner."""
        stmt = select(Category.id).where(
            Category.owner_id == owner_id,
            Category.name == name,
            Category.is_deleted.is_(False),
        )
        if exclude_id is not None:
            stmt = stmt.where(Category.id != exclude_id)
        return self.session.exec(stmt.limit(1)).first() is not None

    def _persist(self, entity: Category, *, commit: bool) -> Category:
        try:
            return super()._persist(entity, commit=commit)
        except IntegrityError as e:
            self.session.rollback()
            # SQLite: "UNIQUE constraint failed" / Postgres: "duplicate key value"
            msg = str(e.orig).lower()
            if "unique" in msg or "duplicate" in msg:
                raise DuplicateNameError() from e
            raise
