"""
➡️ But : Endpoints de synchronisation client.

POST /sync/pull    : tout ce qui a changé depuis `since` + version serveur
POST /sync/batch   : envoi d'un lot ; résultats rangés en success / conflicts / errors
GET  /sync/version : version serveur courante

Un lot répond toujours 200 : les échecs sont décrits item par item dans `errors`.
"""

from fastapi import APIRouter, Depends

from tasksync.api.v1.dependencies import get_current_owner_id, get_sync_service
from tasksync.features.sync.schemas import (
    BatchSyncRequest,
    BatchSyncResponse,
    PullRequest,
    PullResponse,
    VersionResponse,
)
from tasksync.features.sync.services import SyncService

router = APIRouter(
    prefix="/sync",
    tags=["sync"],
)

@router.post(
    "/pull",
    summary="Synchro incrémentale (pull)",
    response_model=PullResponse,
    response_model_exclude_none=True,  # settings / dates absentes => clés omises
)
def pull(
    payload: PullRequest,
    owner_id: int = Depends(get_current_owner_id),
    svc: SyncService = Depends(get_sync_service),
):
    return svc.pull(owner_id, payload.since)

@router.post(
    "/batch",
    summary="Envoyer un lot de modifications",
    response_model=BatchSyncResponse,
)
def batch(
    payload: BatchSyncRequest,
    owner_id: int = Depends(get_current_owner_id),
    svc: SyncService = Depends(get_sync_service),
):
    return svc.push(owner_id, payload)

@router.get(
    "/version",
    summary="Version serveur courante",
    response_model=VersionResponse,
)
def version(
    owner_id: int = Depends(get_current_owner_id),
    svc: SyncService = Depends(get_sync_service),
):
    return VersionResponse(version=svc.version(owner_id))
