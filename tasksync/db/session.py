"""
➡️ But : Configurer la base et gérer les sessions de base de données.

build_engine() : connexion à la base (SQLite par défaut, Postgres via DATABASE_URL).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session sur l'engine de l'application
(request.app.state.engine), la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Pas d'engine global caché : l'engine est injecté dans create_app(), donc chaque test
peut fournir sa propre base (SQLite en mémoire).

Réutilisable par injection (Depends(get_session)).
"""

from typing import Any, Dict, Iterator, Optional

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

# Import all models for creating all tables
from tasksync.db.models.users import User  # noqa: F401
from tasksync.db.models.categories import Category  # noqa: F401
from tasksync.db.models.todos import Todo  # noqa: F401
from tasksync.db.models.user_settings import UserSettings  # noqa: F401
from tasksync.db.models.sync_clock import SyncClock  # noqa: F401


def build_engine(url: str, *, echo: bool = False) -> Engine:
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")
    in_memory = is_sqlite and (url in ("sqlite://", "sqlite:///:memory:"))

    connect_args: Dict[str, Any] = {}
    kwargs: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False
    if in_memory:
        # une seule connexion partagée, sinon chaque session voit une base vide
        kwargs["poolclass"] = StaticPool

    engine = create_engine(
        url,
        echo=echo,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
        **kwargs,
    )

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn, _record):
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_db(engine: Engine) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod avec Alembic, préfère des migrations.
    """
    SQLModel.metadata.create_all(engine)


def get_session(request: Request) -> Iterator[Session]:
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    engine: Optional[Engine] = getattr(request.app.state, "engine", None)
    assert engine is not None, "create_app() must be given an engine"
    with Session(engine) as session:
        yield session
