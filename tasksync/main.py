"""
➡️ But : assembler toutes les pièces du puzzle.

create_app(engine) crée l'instance FastAPI et configure :

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

journalisation des requêtes (méthode, chemin, statut, durée, utilisateur)

Inclut les routers (ex : /api/v1/todos, /api/v1/sync).

Crée les tables au démarrage (lifespan).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

L'engine est injecté : les tests passent leur propre base (SQLite en mémoire).

Point unique d'exécution : uvicorn tasksync.main:app --reload.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.engine import Engine

from tasksync.core.config import settings
from tasksync.core.logging import setup_logging
from tasksync.core.openapi import custom_openapi
from tasksync.db.session import build_engine, init_db

from tasksync.api.v1.routers import authentication, categories, health, settings as settings_router, sync, todos

setup_logging(settings.LOG_LEVEL, settings.LOG_PATH)
logger = logging.getLogger(__name__)


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Crée l'application. Sans engine, en construit un depuis DATABASE_URL."""
    if engine is None:
        engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        init_db(app.state.engine)
        logger.info("%s starting (env=%s, db=%s)", settings.APP_NAME, settings.ENV, app.state.engine.url)
        yield
        logger.info("%s shutting down", settings.APP_NAME)

    application = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "auth", "description": "Opérations liées à l'authentification"},
            {"name": "todos", "description": "Gestion des tâches"},
            {"name": "categories", "description": "Gestion des catégories"},
            {"name": "settings", "description": "Réglages utilisateur"},
            {"name": "sync", "description": "Synchronisation incrémentale et envoi par lot"},
        ],
    )
    application.state.engine = engine

    # CORS (ajustez via CORS_ALLOW_ORIGINS)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s in %.1fms (user=%s)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            getattr(request.state, "owner_id", "-"),
        )
        return response

    # Routers
    application.include_router(health.router)
    application.include_router(authentication.router, prefix="/api/v1")
    application.include_router(todos.router, prefix="/api/v1")
    application.include_router(categories.router, prefix="/api/v1")
    application.include_router(settings_router.router, prefix="/api/v1")
    application.include_router(sync.router, prefix="/api/v1")

    # Génération du schéma OpenAPI custom (facultatif, mais propre)
    application.openapi = lambda: custom_openapi(application)

    return application


# Application par défaut pour uvicorn
app = create_app()

if __name__ == "__main__":
    uvicorn.run("tasksync.main:app", host="127.0.0.1", port=8080, reload=(settings.ENV == "dev")) # http://localhost:8080
