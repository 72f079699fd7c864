from fastapi import APIRouter, Depends

from tasksync.api.v1.dependencies import get_current_owner_id, get_settings_service
from tasksync.api.v1.errors import to_http
from tasksync.core.errors import TaskSyncError
from tasksync.features.settings.schemas import SettingsOut, SettingsUpdateIn
from tasksync.features.settings.services import SettingsService

router = APIRouter(
    prefix="/settings",
    tags=["settings"],
)

@router.get(
    "",
    summary="Lire mes réglages",
    description="Crée les réglages par défaut au premier appel.",
    response_model=SettingsOut,
)
def get_settings(
    owner_id: int = Depends(get_current_owner_id),
    svc: SettingsService = Depends(get_settings_service),
):
    return svc.get(owner_id)

@router.put(
    "",
    summary="Mettre à jour mes réglages",
    response_model=SettingsOut,
)
def update_settings(
    payload: SettingsUpdateIn,
    owner_id: int = Depends(get_current_owner_id),
    svc: SettingsService = Depends(get_settings_service),
):
    try:
        return svc.update(owner_id, payload)
    except TaskSyncError as e:
        raise to_http(e) from e
