"""
➡️ But : Mettre en forme les entités stockées en items sync, et ranger les
résultats d'un lot dans les trois seaux de la réponse.

Fonctions pures : aucune session, aucune requête.
"""

from typing import Iterable, Optional

from tasksync.db.models.categories import Category
from tasksync.db.models.todos import Todo
from tasksync.db.models.user_settings import UserSettings
from tasksync.features.sync.schemas import (
    BatchSyncResponse,
    CategorySyncItem,
    SyncResult,
    TodoSyncItem,
    UserSettingsSyncItem,
)
from tasksync.utils.timestamps import format_rfc3339

SUCCESS_ACTIONS = frozenset({"created", "updated", "deleted"})


def todo_to_item(todo: Todo) -> TodoSyncItem:
    return TodoSyncItem(
        id=todo.id,
        title=todo.title,
        description=todo.description,
        completed=todo.completed,
        priority=int(todo.priority),
        due_date=format_rfc3339(todo.due_date),
        tags=list(todo.tags or []),
        category_id=todo.category_id,
        reminder=format_rfc3339(todo.reminder),
        is_deleted=todo.is_deleted,
        sync_version=todo.sync_version,
        updated_at=format_rfc3339(todo.updated_at),
    )


def category_to_item(category: Category) -> CategorySyncItem:
    return CategorySyncItem(
        id=category.id,
        name=category.name,
        color=category.color,
        icon=category.icon,
        is_deleted=category.is_deleted,
        sync_version=category.sync_version,
        updated_at=format_rfc3339(category.updated_at),
    )


def settings_to_item(settings: Optional[UserSettings]) -> Optional[UserSettingsSyncItem]:
    if settings is None:
        return None
    return UserSettingsSyncItem(
        theme=settings.theme,
        notification_time=settings.notification_time,
        language=settings.language,
        timezone=settings.timezone,
        sync_version=settings.sync_version,
        updated_at=format_rfc3339(settings.updated_at),
    )


def partition_results(results: Iterable[SyncResult]) -> BatchSyncResponse:
    """
    Classe chaque résultat selon son `action` :
    created/updated/deleted -> success, conflict -> conflicts, error -> errors.
    L'ordre de soumission est conservé dans chaque seau.
    """
    response = BatchSyncResponse()
    for result in results:
        if result.action in SUCCESS_ACTIONS:
            response.success.append(result)
        elif result.action == "conflict":
            response.conflicts.append(result)
        else:
            response.errors.append(result)
    return response
