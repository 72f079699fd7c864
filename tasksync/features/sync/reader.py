"""
➡️ But : Lecture incrémentale "tout ce qui a changé depuis la version N".

- todos / catégories : sync_version > since, lignes supprimées comprises,
  triées par version croissante (id en départage) ;
- réglages : seulement s'ils existent et sont plus récents que since ;
- server_version : recalculée à chaque pull (pas déduite des lignes renvoyées),
  pour que le client apprenne le plafond réel même quand rien n'a changé.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from tasksync.db.models.categories import Category
from tasksync.db.models.todos import Todo
from tasksync.db.models.user_settings import UserSettings
from tasksync.db.repositories.categories import CategoryRepository
from tasksync.db.repositories.sync_clock import SyncClockRepository
from tasksync.db.repositories.todos import TodoRepository
from tasksync.db.repositories.user_settings import UserSettingsRepository


@dataclass
class SyncSnapshot:
    todos: Sequence[Todo]
    categories: Sequence[Category]
    settings: Optional[UserSettings]
    server_version: int


class IncrementalSyncReader:
    def __init__(
        self,
        *,
        todo_repo: TodoRepository,
        category_repo: CategoryRepository,
        settings_repo: UserSettingsRepository,
        clock_repo: SyncClockRepository,
    ):
        self.todo_repo = todo_repo
        self.category_repo = category_repo
        self.settings_repo = settings_repo
        self.clock_repo = clock_repo

    def pull(self, owner_id: int, since: int) -> SyncSnapshot:
        return SyncSnapshot(
            todos=self.todo_repo.list_since(owner_id, since),
            categories=self.category_repo.list_since(owner_id, since),
            settings=self.settings_repo.get_since(owner_id, since),
            server_version=self.clock_repo.current_server_version(owner_id),
        )
