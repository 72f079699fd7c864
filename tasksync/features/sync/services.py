"""
➡️ But : Point d'entrée de la synchro pour les routers.

SyncService assemble le lecteur incrémental, le résolveur de conflits et
l'assembleur de réponses :

pull(owner, since)   -> PullResponse
push(owner, batch)   -> BatchSyncResponse (success / conflicts / errors)
version(owner)       -> version serveur courante

🔹 Avantages :

Les routes ne connaissent qu'un service, comme pour les autres features.
"""

import logging

from tasksync.features.sync.assembler import (
    category_to_item,
    partition_results,
    settings_to_item,
    todo_to_item,
)
from tasksync.features.sync.reader import IncrementalSyncReader
from tasksync.features.sync.resolver import ConflictResolver
from tasksync.features.sync.schemas import BatchSyncRequest, BatchSyncResponse, PullResponse
from tasksync.features.sync.versions import VersionAllocator

logger = logging.getLogger(__name__)


class SyncService:
    def __init__(self, *, reader: IncrementalSyncReader, resolver: ConflictResolver, versions: VersionAllocator):
        self.reader = reader
        self.resolver = resolver
        self.versions = versions

    def pull(self, owner_id: int, since: int) -> PullResponse:
        snapshot = self.reader.pull(owner_id, since)
        logger.debug(
            "pull owner=%s since=%s -> %d todos, %d categories, settings=%s, server_version=%s",
            owner_id,
            since,
            len(snapshot.todos),
            len(snapshot.categories),
            snapshot.settings is not None,
            snapshot.server_version,
        )
        return PullResponse(
            todos=[todo_to_item(t) for t in snapshot.todos],
            categories=[category_to_item(c) for c in snapshot.categories],
            settings=settings_to_item(snapshot.settings),
            server_version=snapshot.server_version,
        )

    def push(self, owner_id: int, batch: BatchSyncRequest) -> BatchSyncResponse:
        response = partition_results(self.resolver.resolve(owner_id, batch))
        logger.info(
            "batch owner=%s: %d success, %d conflicts, %d errors",
            owner_id,
            len(response.success),
            len(response.conflicts),
            len(response.errors),
        )
        return response

    def version(self, owner_id: int) -> int:
        return self.versions.current(owner_id)
