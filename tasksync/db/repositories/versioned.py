"""
➡️ But : Requêtes communes aux entités synchronisées (Todo, Category).

Toute lecture passe par owner_id : un id seul ne suffit jamais à retrouver une ligne.

🔹 Avantages :

Un seul endroit pour le scoping par owner et pour la requête "depuis la version N".
"""

from typing import Optional, Sequence, TypeVar

from sqlmodel import select

from tasksync.db.models.base import VersionedModelDB
from tasksync.db.repositories.base import BaseRepository

VersionedT = TypeVar("VersionedT", bound=VersionedModelDB)


class VersionedRepository(BaseRepository[VersionedT]):

    def get_for_owner(self, id_: int, owner_id: int, *, include_deleted: bool = True) -> Optional[VersionedT]:
        """Retourne la ligne (id, owner) ou None. Inclut les lignes supprimées par défaut."""
        stmt = select(self.model).where(self.model.id == id_, self.model.owner_id == owner_id)
        if not include_deleted:
            stmt = stmt.where(self.model.is_deleted.is_(False))
        return self.session.exec(stmt).first()

    def list_since(self, owner_id: int, since: int) -> Sequence[VersionedT]:
        """
        Toutes les lignes du owner modifiées après `since`, supprimées comprises,
        triées par sync_version croissante (id en départage).
        """
        stmt = (
            select(self.model)
            .where(self.model.owner_id == owner_id, self.model.sync_version > since)
            .order_by(self.model.sync_version.asc(), self.model.id.asc())
        )
        return self.session.exec(stmt).all()
