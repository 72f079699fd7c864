from typing import List

from fastapi import APIRouter, Depends, Path, status

from tasksync.api.v1.dependencies import get_category_service, get_current_owner_id
from tasksync.api.v1.errors import to_http
from tasksync.core.errors import TaskSyncError
from tasksync.features.categories.schemas import CategoryCreateIn, CategoryOut, CategoryUpdateIn
from tasksync.features.categories.services import CategoryService

router = APIRouter(
    prefix="/categories",
    tags=["categories"],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "",
    summary="Lister mes catégories",
    response_model=List[CategoryOut],
)
def list_categories(
    owner_id: int = Depends(get_current_owner_id),
    svc: CategoryService = Depends(get_category_service),
):
    return svc.list(owner_id)

@router.post(
    "",
    summary="Créer une catégorie",
    status_code=status.HTTP_201_CREATED,
    response_model=CategoryOut,
    responses={409: {"description": "Nom déjà utilisé"}},
)
def create_category(
    payload: CategoryCreateIn,
    owner_id: int = Depends(get_current_owner_id),
    svc: CategoryService = Depends(get_category_service),
):
    try:
        return svc.create(owner_id, payload)
    except TaskSyncError as e:
        raise to_http(e) from e

@router.patch(
    "/{category_id}",
    summary="Mettre à jour une catégorie",
    response_model=CategoryOut,
    responses={409: {"description": "Nom déjà utilisé"}},
)
def update_category(
    payload: CategoryUpdateIn,
    category_id: int = Path(..., ge=1),
    owner_id: int = Depends(get_current_owner_id),
    svc: CategoryService = Depends(get_category_service),
):
    try:
        return svc.update(owner_id, category_id, payload)
    except TaskSyncError as e:
        raise to_http(e) from e

@router.delete(
    "/{category_id}",
    summary="Supprimer une catégorie",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_category(
    category_id: int = Path(..., ge=1),
    owner_id: int = Depends(get_current_owner_id),
    svc: CategoryService = Depends(get_category_service),
):
    try:
        svc.delete(owner_id, category_id)
    except TaskSyncError as e:
        raise to_http(e) from e
    return None
