from typing import Optional

from sqlalchemy import func, select as sa_select, union_all
from sqlmodel import select

from tasksync.db.models.categories import Category
from tasksync.db.models.sync_clock import SyncClock
from tasksync.db.models.todos import Todo
from tasksync.db.models.user_settings import UserSettings
from tasksync.db.repositories.base import BaseRepository


class SyncClockRepository(BaseRepository[SyncClock]):
    """Compteur de version par owner + calcul de la version serveur courante."""

    model = SyncClock

    def get_locked(self, owner_id: int) -> Optional[SyncClock]:
        """
        Lit la ligne du owner avec SELECT ... FOR UPDATE.
        Postgres : verrou de ligne jusqu'au commit. SQLite : clause ignorée,
        les écrivains sont de toute façon sérialisés par le verrou de base.
        """
        stmt = select(SyncClock).where(SyncClock.owner_id == owner_id).with_for_update()
        return self.session.exec(stmt).first()

    def current_server_version(self, owner_id: int) -> int:
        """
        max(sync_version) sur todos ∪ catégories ∪ réglages du owner, 0 si vide.
        Une seule requête : le max des trois max scalaires (portable SQLite/Postgres).
        """
        per_kind = union_all(
            *[
                sa_select(func.max(model.sync_version).label("v")).where(model.owner_id == owner_id)
                for model in (Todo, Category, UserSettings)
            ]
        ).subquery()
        stmt = select(func.coalesce(func.max(per_kind.c.v), 0))
        return int(self.session.exec(stmt).one())
