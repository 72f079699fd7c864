"""
➡️ But : Attribuer une version de synchro à chaque écriture d'un owner.

version = max(horloge murale en ms, dernière version + 1), gardée dans la ligne
SyncClock du owner lue en SELECT ... FOR UPDATE.

Deux écritures dans la même milliseconde reçoivent donc deux versions distinctes,
et l'ordre des versions suit l'ordre des écritures. La valeur garde son sens
"millisecondes depuis l'epoch" tant que l'horloge avance plus vite que les écritures.

🔹 Avantages :

Pas d'égalité de version possible pour un même owner : le test de conflit
(version serveur > version client) reste fiable.

Le verrou est posé sur une seule ligne par owner : deux owners ne se bloquent jamais.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict

from sqlmodel import Session

from tasksync.db.repositories.sync_clock import SyncClockRepository
from tasksync.utils.timestamps import from_millis, now_millis


@dataclass(frozen=True)
class VersionStamp:
    version: int         # clé d'ordre (strictement croissante par owner)
    timestamp: datetime  # instant mural UTC, persisté en updated_at

    def as_fields(self, *, created: bool = False) -> Dict[str, Any]:
        """Colonnes à écrire sur l'entité stampée."""
        fields: Dict[str, Any] = {"sync_version": self.version, "updated_at": self.timestamp}
        if created:
            fields["created_at"] = self.timestamp
        return fields


class VersionAllocator:
    """
    Le stamp est écrit avec commit=False : il part dans la même transaction
    que l'écriture de l'entité, et disparaît avec elle en cas de rollback.
    """

    def __init__(self, session: Session, *, clock: Callable[[], int] = now_millis):
        self.repo = SyncClockRepository(session)
        self.clock = clock

    def next_version(self, owner_id: int) -> VersionStamp:
        now_ms = self.clock()
        row = self.repo.get_locked(owner_id)
        if row is None:
            version = max(now_ms, 1)
            self.repo.create(commit=False, owner_id=owner_id, version=version)
        else:
            version = max(now_ms, row.version + 1)
            self.repo.update(row, commit=False, version=version)
        return VersionStamp(version=version, timestamp=from_millis(now_ms))

    def current(self, owner_id: int) -> int:
        """Version serveur courante du owner (0 si aucune donnée)."""
        return self.repo.current_server_version(owner_id)
