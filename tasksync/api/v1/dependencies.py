"""
➡️ But : Centraliser les dépendances réutilisables des routes.

Exemples :

get_todo_service() : crée un TodoService à partir d'une session DB.

get_current_owner_id() : vérifie le bearer token et renvoie l'owner des données.

pagination() : paramètres communs page et size.

🔹 Avantages :

Routes plus propres (pas de code dupliqué).

Facile à injecter dans plusieurs endpoints (Depends()).

Une seule session par requête : tous les repos d'une route partagent la même transaction.
"""

from fastapi import Depends, HTTPException, Query, Request, status, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlmodel import Session

from tasksync.core.config import jwt_settings, settings
from tasksync.db.session import get_session

from tasksync.db.repositories.users import UserRepository
from tasksync.features.authentication.services import AuthService

from tasksync.db.repositories.todos import TodoRepository
from tasksync.db.repositories.categories import CategoryRepository
from tasksync.db.repositories.user_settings import UserSettingsRepository
from tasksync.db.repositories.sync_clock import SyncClockRepository

from tasksync.features.todos.services import TodoService
from tasksync.features.categories.services import CategoryService
from tasksync.features.settings.services import SettingsService

from tasksync.features.sync.versions import VersionAllocator
from tasksync.features.sync.reader import IncrementalSyncReader
from tasksync.features.sync.resolver import ConflictResolver
from tasksync.features.sync.services import SyncService


def pagination(
    page: int = Query(1, ge=1, description="Numéro de page", examples=[1]),
    size: int = Query(20, ge=1, le=settings.PAGE_SIZE_MAX, description="Taille de page", examples=[20]),
):
    offset = (page - 1) * size
    return {"offset": offset, "limit": size, "page": page, "size": size}


# -----------------------------
# Auth
# -----------------------------
def get_auth_service(session: Session = Depends(get_session)) -> AuthService:
    return AuthService(user_repo=UserRepository(session), jwt_settings=jwt_settings)


bearer_scheme = HTTPBearer(auto_error=False)

def get_access_token_from_bearer(
    credentials: HTTPAuthorizationCredentials = Security(bearer_scheme),
) -> str:
    if not credentials or credentials.scheme.lower() != "bearer":
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing or invalid auth scheme")
    return credentials.credentials


def get_current_owner_id(
    request: Request,
    access_token: str = Depends(get_access_token_from_bearer),
    auth_svc: AuthService = Depends(get_auth_service),
) -> int:
    """Identité vérifiée de la requête : tout le reste de l'API est scopé par cet id."""
    owner_id = auth_svc.get_current_user(access_token=access_token).id
    request.state.owner_id = owner_id  # lu par le middleware de logs
    return owner_id


# -----------------------------
# Versions
# -----------------------------
def get_version_allocator(session: Session = Depends(get_session)) -> VersionAllocator:
    return VersionAllocator(session)


# -----------------------------
# Entity services
# -----------------------------
def get_todo_service(
    session: Session = Depends(get_session),
    versions: VersionAllocator = Depends(get_version_allocator),
) -> TodoService:
    return TodoService(TodoRepository(session), CategoryRepository(session), versions)

def get_category_service(
    session: Session = Depends(get_session),
    versions: VersionAllocator = Depends(get_version_allocator),
) -> CategoryService:
    return CategoryService(CategoryRepository(session), versions)

def get_settings_service(
    session: Session = Depends(get_session),
    versions: VersionAllocator = Depends(get_version_allocator),
) -> SettingsService:
    return SettingsService(UserSettingsRepository(session), versions)


# -----------------------------
# Sync service
# -----------------------------
def get_sync_service(
    session: Session = Depends(get_session),
    versions: VersionAllocator = Depends(get_version_allocator),
    todo_svc: TodoService = Depends(get_todo_service),
    category_svc: CategoryService = Depends(get_category_service),
    settings_svc: SettingsService = Depends(get_settings_service),
) -> SyncService:
    """
    Fournit une instance de SyncService avec lecteur + résolveur injectés.
    Pattern identique aux autres services :
    - aucune logique dans la route
    - dépendances résolues par FastAPI
    """
    reader = IncrementalSyncReader(
        todo_repo=TodoRepository(session),
        category_repo=CategoryRepository(session),
        settings_repo=UserSettingsRepository(session),
        clock_repo=SyncClockRepository(session),
    )
    resolver = ConflictResolver(
        session,
        todos=todo_svc,
        categories=category_svc,
        settings=settings_svc,
    )
    return SyncService(reader=reader, resolver=resolver, versions=versions)
