"""
➡️ But : Contenir la logique métier des tâches : orchestrer les repos, appliquer des règles, gérer les erreurs.

TodoService :
- toute lecture/écriture est scopée par owner ;
- chaque écriture (création, modification, suppression logique) prend exactement
  une version au VersionAllocator, écrite avec l'entité dans la même transaction ;
- la catégorie référencée doit appartenir au même owner (et, côté CRUD, ne pas être supprimée) ;
- la priorité doit être dans 0–3.

Lève les erreurs métier (NotFoundError, InvalidError) : les routers les traduisent
en HTTP, la synchro par lot les transforme en résultat "error".

🔹 Avantages :

Code métier découplé du web.

Partagé par le CRUD et par le ConflictResolver : une seule règle d'écriture.
"""

import logging
from typing import Any, Dict, Optional

from tasksync.core.errors import InvalidError, NotFoundError
from tasksync.db.models.todos import Priority, Todo
from tasksync.db.repositories.categories import CategoryRepository
from tasksync.db.repositories.todos import TodoRepository
from tasksync.features.sync.versions import VersionAllocator
from tasksync.features.todos.schemas import TodoCreateIn, TodoUpdateIn
from tasksync.utils.timestamps import parse_rfc3339

logger = logging.getLogger(__name__)

DATE_FIELDS = ("due_date", "reminder")


class TodoService:
    def __init__(self, repo: TodoRepository, category_repo: CategoryRepository, versions: VersionAllocator):
        self.repo = repo
        self.category_repo = category_repo
        self.versions = versions

    # -------- Reads --------

    def list(
        self,
        owner_id: int,
        *,
        offset: int = 0,
        limit: int = 20,
        completed: Optional[bool] = None,
        category_id: Optional[int] = None,
        q: Optional[str] = None,
    ) -> Dict[str, Any]:
        filters = {"completed": completed, "category_id": category_id, "q": q}
        items = self.repo.list_active(owner_id, offset=offset, limit=limit, **filters)
        total = self.repo.count_filtered(owner_id, **filters)
        return {"items": items, "total": total}

    def get(self, owner_id: int, todo_id: int) -> Todo:
        todo = self.repo.get_for_owner(todo_id, owner_id, include_deleted=False)
        if not todo:
            raise NotFoundError("todo not found")
        return todo

    def find(self, owner_id: int, todo_id: int) -> Optional[Todo]:
        """Lookup sync : les tâches supprimées sont incluses."""
        return self.repo.get_for_owner(todo_id, owner_id)

    # -------- Writes (CRUD) --------

    def create(self, owner_id: int, payload: TodoCreateIn) -> Todo:
        fields = payload.model_dump()
        for key in DATE_FIELDS:
            fields[key] = parse_rfc3339(fields[key])
        return self.create_fields(owner_id, allow_deleted_category=False, **fields)

    def update(self, owner_id: int, todo_id: int, payload: TodoUpdateIn) -> Todo:
        todo = self.get(owner_id, todo_id)
        changes = payload.model_dump(exclude_unset=True)
        for key in DATE_FIELDS:
            if changes.get(key) is None:
                continue
            parsed = parse_rfc3339(changes[key])
            if parsed is None:
                # date illisible => champ absent
                changes.pop(key)
            else:
                changes[key] = parsed
        return self.apply_fields(todo, allow_deleted_category=False, **changes)

    def delete(self, owner_id: int, todo_id: int) -> None:
        todo = self.get(owner_id, todo_id)
        self.apply_fields(todo, is_deleted=True)

    # -------- Writes (bas niveau, partagées avec la synchro) --------

    def create_fields(self, owner_id: int, *, allow_deleted_category: bool = True, **fields) -> Todo:
        self._validate(owner_id, fields, allow_deleted_category=allow_deleted_category)
        stamp = self.versions.next_version(owner_id)
        todo = self.repo.create(owner_id=owner_id, **stamp.as_fields(created=True), **fields)
        logger.debug("todo %s created for owner %s (v%s)", todo.id, owner_id, todo.sync_version)
        return todo

    def apply_fields(self, todo: Todo, *, allow_deleted_category: bool = True, **changes) -> Todo:
        self._validate(todo.owner_id, changes, allow_deleted_category=allow_deleted_category)
        stamp = self.versions.next_version(todo.owner_id)
        todo = self.repo.update(todo, **stamp.as_fields(), **changes)
        logger.debug("todo %s updated for owner %s (v%s)", todo.id, todo.owner_id, todo.sync_version)
        return todo

    # -------- Helpers --------

    def _validate(self, owner_id: int, fields: Dict[str, Any], *, allow_deleted_category: bool) -> None:
        if "priority" in fields:
            try:
                fields["priority"] = int(Priority(fields["priority"]))
            except ValueError:
                raise InvalidError(f"invalid priority: {fields['priority']!r}") from None
        category_id = fields.get("category_id")
        if category_id is None:
            return
        category = self.category_repo.get_for_owner(category_id, owner_id, include_deleted=allow_deleted_category)
        if category is None:
            raise NotFoundError("category not found")
