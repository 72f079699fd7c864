"""
➡️ But : Réconcilier un lot d'items envoyés par un client avec l'état du serveur.

Pour chaque item, dans l'ordre de soumission (todos, puis catégories, puis réglages) :

1. id absent / 0            -> création pour l'owner                  -> "created"
2. (id, owner) introuvable  -> rien n'est écrit                       -> "error" ("not found")
3. serveur.updated_at > client.updated_at ET serveur.version > client.version
                            -> le serveur gagne, rien n'est écrit     -> "conflict"
4. sinon les champs du client sont appliqués (nouvelle version)       -> "updated"
   (catégorie avec is_deleted=true : suppression logique              -> "deleted")

Les égalités donnent raison au client : le conflit exige les DEUX conditions.

Chaque item est commité seul. Une erreur (métier ou stockage) annule l'item en cours
(rollback de la session) et devient un résultat "error" ; les items suivants sont
traités normalement. Le lot n'est donc pas transactionnel.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from sqlmodel import Session

from tasksync.core.errors import ConflictError, InternalError, InvalidError, TaskSyncError
from tasksync.features.categories.services import CategoryService
from tasksync.features.settings.services import SettingsService
from tasksync.features.sync.schemas import (
    BatchSyncRequest,
    CategorySyncItem,
    ResultType,
    SyncResult,
    TodoSyncItem,
    UserSettingsSyncItem,
)
from tasksync.features.todos.services import TodoService
from tasksync.utils.timestamps import parse_rfc3339

logger = logging.getLogger(__name__)


def is_conflict(server_updated_at: datetime, server_version: int, client_updated_at: str, client_version: int) -> bool:
    """
    Le serveur gagne seulement s'il est plus récent sur les deux axes.
    Un updated_at client illisible est une erreur de l'item, pas un conflit.
    """
    client_ts = parse_rfc3339(client_updated_at)
    if client_ts is None:
        raise InvalidError("invalid updated_at")
    return server_updated_at > client_ts and server_version > client_version


def check_conflict(
    server_id: int, server_updated_at: datetime, server_version: int, client_updated_at: str, client_version: int
) -> None:
    """Lève ConflictError (avec la version serveur) quand le serveur gagne."""
    if is_conflict(server_updated_at, server_version, client_updated_at, client_version):
        raise ConflictError(server_id=server_id, server_version=server_version)


class ConflictResolver:
    def __init__(
        self,
        session: Session,
        *,
        todos: TodoService,
        categories: CategoryService,
        settings: SettingsService,
    ):
        self.session = session
        self.todos = todos
        self.categories = categories
        self.settings = settings

    def resolve(self, owner_id: int, batch: BatchSyncRequest) -> List[SyncResult]:
        results: List[SyncResult] = []
        for todo_item in batch.todos:
            results.append(self._guard("todo", todo_item.id, lambda: self.resolve_todo(owner_id, todo_item)))
        for category_item in batch.categories:
            results.append(
                self._guard("category", category_item.id, lambda: self.resolve_category(owner_id, category_item))
            )
        if batch.settings is not None:
            settings_item = batch.settings
            results.append(self._guard("settings", 0, lambda: self.resolve_settings(owner_id, settings_item)))
        return results

    # -------- Par type --------

    def resolve_todo(self, owner_id: int, item: TodoSyncItem) -> SyncResult:
        fields = item.model_dump(exclude={"id", "sync_version", "updated_at"})
        fields["due_date"] = parse_rfc3339(item.due_date)
        fields["reminder"] = parse_rfc3339(item.reminder)

        if not item.id:
            todo = self.todos.create_fields(owner_id, **fields)
            return self._result("todo", item.id, "created", todo.id, todo.sync_version)

        todo = self.todos.find(owner_id, item.id)
        if todo is None:
            return self._result("todo", item.id, "error", message="not found")
        check_conflict(todo.id, todo.updated_at, todo.sync_version, item.updated_at, item.sync_version)

        # is_deleted est appliqué comme un champ : la suppression côté client remonte en "updated"
        todo = self.todos.apply_fields(todo, **fields)
        return self._result("todo", item.id, "updated", todo.id, todo.sync_version)

    def resolve_category(self, owner_id: int, item: CategorySyncItem) -> SyncResult:
        fields = item.model_dump(include={"name", "color", "icon"})

        if not item.id:
            category = self.categories.create_fields(owner_id, is_deleted=item.is_deleted, **fields)
            return self._result("category", item.id, "created", category.id, category.sync_version)

        category = self.categories.find(owner_id, item.id)
        if category is None:
            return self._result("category", item.id, "error", message="not found")
        check_conflict(category.id, category.updated_at, category.sync_version, item.updated_at, item.sync_version)

        if item.is_deleted:
            category = self.categories.soft_delete(category)
            return self._result("category", item.id, "deleted", category.id, category.sync_version)
        category = self.categories.apply_fields(category, is_deleted=False, **fields)
        return self._result("category", item.id, "updated", category.id, category.sync_version)

    def resolve_settings(self, owner_id: int, item: UserSettingsSyncItem) -> SyncResult:
        fields = item.model_dump(exclude={"sync_version", "updated_at"})

        row = self.settings.find(owner_id)
        if row is None:
            # première synchro des réglages : la ligne naît avec les valeurs du client
            row = self.settings.create_fields(owner_id, **fields)
            return self._result("settings", 0, "updated", 0, row.sync_version)
        check_conflict(0, row.updated_at, row.sync_version, item.updated_at, item.sync_version)

        row = self.settings.apply_fields(row, **fields)
        return self._result("settings", 0, "updated", 0, row.sync_version)

    # -------- Helpers --------

    def _guard(self, kind: ResultType, local_id: int, fn: Callable[[], SyncResult]) -> SyncResult:
        """Exécute un item ; toute erreur est confinée à cet item (rollback + résultat)."""
        try:
            return fn()
        except ConflictError as e:
            self.session.rollback()
            return self._conflict(kind, local_id, e)
        except InternalError as e:
            self.session.rollback()
            logger.error("batch %s %s failed in storage: %s", kind, local_id, e.__cause__)
            return self._result(kind, local_id, "error", message=e.message)
        except TaskSyncError as e:
            self.session.rollback()
            logger.warning("batch %s %s rejected: %s", kind, local_id, e.message)
            return self._result(kind, local_id, "error", message=e.message)
        except Exception:
            # erreur imprévue (stockage hors repository, bug) : l'item échoue, pas le lot
            self.session.rollback()
            logger.exception("batch %s %s failed", kind, local_id)
            return self._result(kind, local_id, "error", message="internal error")

    @staticmethod
    def _conflict(kind: ResultType, local_id: int, error: ConflictError) -> SyncResult:
        return SyncResult(
            type=kind,
            local_id=local_id,
            server_id=error.server_id,
            action="conflict",
            message=error.message,
            sync_version=error.server_version,
        )

    @staticmethod
    def _result(
        kind: ResultType,
        local_id: int,
        action: str,
        server_id: int = 0,
        sync_version: int = 0,
        *,
        message: Optional[str] = None,
    ) -> SyncResult:
        return SyncResult(
            type=kind,
            local_id=local_id,
            server_id=server_id,
            action=action,
            message=message or "",
            sync_version=sync_version,
        )
