from typing import Optional

from sqlmodel import select

from tasksync.db.models.user_settings import UserSettings
from tasksync.db.repositories.base import BaseRepository


class UserSettingsRepository(BaseRepository[UserSettings]):
    """Réglages utilisateur : la clé primaire est l'owner_id."""

    model = UserSettings

    def get_since(self, owner_id: int, since: int) -> Optional[UserSettings]:
        """Retourne les réglages seulement s'ils existent et sont plus récents que `since`."""
        stmt = select(UserSettings).where(
            UserSettings.owner_id == owner_id, UserSettings.sync_version > since
        )
        return self.session.exec(stmt).first()
