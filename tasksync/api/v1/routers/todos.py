"""
➡️ But : Définir les endpoints de l'API.

C'est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PATCH, DELETE…)

Appelle le service correspondant

Retourne les schémas de sortie (response_model)

Chaque fonction représente une route.

🔹 Avantages :

Automatiquement documentée dans Swagger :

summary, description, response_model, examples

Isolation totale du reste du code : les routes ne contiennent ni SQL ni logique métier.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, status

from tasksync.api.v1.dependencies import get_current_owner_id, get_todo_service, pagination
from tasksync.api.v1.errors import to_http
from tasksync.core.errors import TaskSyncError
from tasksync.features.todos.schemas import TodoCreateIn, TodoOut, TodoPage, TodoUpdateIn
from tasksync.features.todos.services import TodoService

router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={404: {"description": "Not Found"}},
)

@router.get(
    "",
    summary="Lister les todos",
    description="Retourne une liste paginée de tâches (non supprimées), plus récentes d'abord.",
    response_model=TodoPage,
    responses={
        200: {
            "description": "Liste paginée",
            "content": {
                "application/json": {
                    "example": {"items": [{"id": 1, "title": "Acheter du lait", "description": "",
                                           "completed": False, "priority": 1, "tags": ["maison"],
                                           "is_deleted": False, "sync_version": 1735725600000,
                                           "created_at": "2025-01-01T10:00:00.000Z",
                                           "updated_at": "2025-01-01T10:00:00.000Z"}],
                                "total": 1, "page": 1, "size": 20}
                }
            },
        }
    },
)
def list_todos(
    p=Depends(pagination),
    completed: Optional[bool] = Query(None),
    category_id: Optional[int] = Query(None),
    q: Optional[str] = Query(None, description="Recherche dans titre et description"),
    owner_id: int = Depends(get_current_owner_id),
    svc: TodoService = Depends(get_todo_service),
):
    data = svc.list(
        owner_id,
        offset=p["offset"],
        limit=p["limit"],
        completed=completed,
        category_id=category_id,
        q=q,
    )
    # Contrôle fin du schéma : on convertit les items -> TodoOut
    return TodoPage(
        items=[TodoOut.model_validate(i) for i in data["items"]],
        total=data["total"],
        page=p["page"],
        size=p["size"],
    )

@router.post(
    "",
    summary="Créer un todo",
    status_code=status.HTTP_201_CREATED,
    response_model=TodoOut,
)
def create_todo(
    payload: TodoCreateIn,
    owner_id: int = Depends(get_current_owner_id),
    svc: TodoService = Depends(get_todo_service),
):
    try:
        return svc.create(owner_id, payload)
    except TaskSyncError as e:
        raise to_http(e) from e

@router.get(
    "/{todo_id}",
    summary="Récupérer un todo",
    response_model=TodoOut,
)
def get_todo(
    todo_id: int = Path(..., ge=1),
    owner_id: int = Depends(get_current_owner_id),
    svc: TodoService = Depends(get_todo_service),
):
    try:
        return svc.get(owner_id, todo_id)
    except TaskSyncError as e:
        raise to_http(e) from e

@router.patch(
    "/{todo_id}",
    summary="Mettre à jour un todo",
    response_model=TodoOut,
)
def update_todo(
    payload: TodoUpdateIn,
    todo_id: int = Path(..., ge=1),
    owner_id: int = Depends(get_current_owner_id),
    svc: TodoService = Depends(get_todo_service),
):
    try:
        return svc.update(owner_id, todo_id, payload)
    except TaskSyncError as e:
        raise to_http(e) from e

@router.delete(
    "/{todo_id}",
    summary="Supprimer un todo",
    description="Suppression logique : la tâche reste en base et remonte dans la synchro.",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_todo(
    todo_id: int = Path(..., ge=1),
    owner_id: int = Depends(get_current_owner_id),
    svc: TodoService = Depends(get_todo_service),
):
    try:
        svc.delete(owner_id, todo_id)
    except TaskSyncError as e:
        raise to_http(e) from e
    return None
