"""
➡️ But : Encapsuler toutes les opérations de base de données.

TodoRepository : lecture/écriture sur la table Todo, toujours scopée par owner.

Ne contient aucune logique métier, juste de la persistance.

🔹 Avantages :

Réutilisable (les services n’ont pas à savoir comment la DB fonctionne).

Testable indépendamment (mock du repo sans base réelle).
"""

from typing import Optional, Sequence

from sqlmodel import select, or_, func

from tasksync.db.models.todos import Todo
from tasksync.db.repositories.versioned import VersionedRepository


class TodoRepository(VersionedRepository[Todo]):
    model = Todo

    def _filtered(self, stmt, owner_id: int, *, completed: Optional[bool], category_id: Optional[int], q: Optional[str]):
        stmt = stmt.where(Todo.owner_id == owner_id, Todo.is_deleted.is_(False))
        if completed is not None:
            stmt = stmt.where(Todo.completed.is_(completed))
        if category_id is not None:
            stmt = stmt.where(Todo.category_id == category_id)
        if q:
            like = f"%{q}%"
            stmt = stmt.where(or_(Todo.title.ilike(like), Todo.description.ilike(like)))
        return stmt

    def list_active(
        self,
        owner_id: int,
        *,
        offset: int = 0,
        limit: int = 20,
        completed: Optional[bool] = None,
        category_id: Optional[int] = None,
        q: Optional[str] = None,
    ) -> Sequence[Todo]:
        """
        Liste paginée des tâches non supprimées d'un owner, plus récentes d'abord.
        - completed   : filtre sur l'état
        - category_id : filtre par catégorie
        - q           : recherche insensible à la casse sur title/description
        """
        stmt = self._filtered(select(Todo), owner_id, completed=completed, category_id=category_id, q=q)
        stmt = stmt.order_by(Todo.created_at.desc(), Todo.id.desc()).offset(offset).limit(limit)
        return self.session.exec(stmt).all()

    def count_filtered(
        self,
        owner_id: int,
        *,
        completed: Optional[bool] = None,
        category_id: Optional[int] = None,
        q: Optional[str] = None,
    ) -> int:
        stmt = self._filtered(
            select(func.count()).select_from(Todo), owner_id, completed=completed, category_id=category_id, q=q
        )
        return int(self.session.exec(stmt).one())
