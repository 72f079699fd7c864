"""
➡️ But : Logique métier des réglages utilisateur (une ligne par owner).

La ligne est créée paresseusement, avec les valeurs par défaut de la configuration,
à la première lecture. Cette création est une écriture : elle prend une version.
"""

import logging
from typing import Optional

from tasksync.core.config import settings as app_settings
from tasksync.core.errors import InvalidError
from tasksync.db.models.user_settings import UserSettings
from tasksync.db.repositories.user_settings import UserSettingsRepository
from tasksync.features.settings.schemas import SettingsUpdateIn
from tasksync.features.sync.versions import VersionAllocator

logger = logging.getLogger(__name__)

THEMES = ("light", "dark", "auto")


class SettingsService:
    def __init__(self, repo: UserSettingsRepository, versions: VersionAllocator):
        self.repo = repo
        self.versions = versions

    def get(self, owner_id: int) -> UserSettings:
        row = self.find(owner_id)
        if row is None:
            row = self.create_fields(
                owner_id,
                theme=app_settings.DEFAULT_THEME,
                notification_time=app_settings.DEFAULT_NOTIFICATION_TIME,
                language=app_settings.DEFAULT_LANGUAGE,
                timezone=app_settings.DEFAULT_TIMEZONE,
            )
            logger.info("default settings created for owner %s", owner_id)
        return row

    def find(self, owner_id: int) -> Optional[UserSettings]:
        return self.repo.get(owner_id)

    def update(self, owner_id: int, payload: SettingsUpdateIn) -> UserSettings:
        row = self.get(owner_id)
        return self.apply_fields(row, **payload.model_dump(exclude_unset=True, exclude_none=True))

    # -------- Writes (bas niveau, partagées avec la synchro) --------

    def create_fields(self, owner_id: int, **fields) -> UserSettings:
        self._validate(fields)
        stamp = self.versions.next_version(owner_id)
        return self.repo.create(owner_id=owner_id, **stamp.as_fields(created=True), **fields)

    def apply_fields(self, row: UserSettings, **changes) -> UserSettings:
        self._validate(changes)
        stamp = self.versions.next_version(row.owner_id)
        return self.repo.update(row, **stamp.as_fields(), **changes)

    @staticmethod
    def _validate(fields) -> None:
        theme = fields.get("theme")
        if theme is not None and theme not in THEMES:
            raise InvalidError(f"invalid theme: {theme!r}")
