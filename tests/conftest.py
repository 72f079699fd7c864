"""Shared fixtures: in-memory SQLite engine, services wired on one session, HTTP client."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Session

from tasksync.db.models.users import User
from tasksync.db.repositories.categories import CategoryRepository
from tasksync.db.repositories.sync_clock import SyncClockRepository
from tasksync.db.repositories.todos import TodoRepository
from tasksync.db.repositories.user_settings import UserSettingsRepository
from tasksync.db.repositories.users import UserRepository
from tasksync.db.session import build_engine, init_db
from tasksync.features.categories.services import CategoryService
from tasksync.features.settings.services import SettingsService
from tasksync.features.sync.reader import IncrementalSyncReader
from tasksync.features.sync.resolver import ConflictResolver
from tasksync.features.sync.services import SyncService
from tasksync.features.sync.versions import VersionAllocator
from tasksync.features.todos.services import TodoService
from tasksync.main import create_app

START_MS = 1_735_725_600_000  # 2025-01-01T10:00:00Z


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Fresh in-memory database per test."""
    eng = build_engine("sqlite://")
    init_db(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session, None, None]:
    with Session(engine) as s:
        yield s


@pytest.fixture
def clock() -> Callable[[], int]:
    """Wall clock that moves one second forward on every read."""
    ticks = itertools.count(START_MS, 1000)
    return lambda: next(ticks)


@pytest.fixture
def versions(session: Session, clock: Callable[[], int]) -> VersionAllocator:
    return VersionAllocator(session, clock=clock)


def _make_user(session: Session, username: str) -> User:
    # hash factice : ces fixtures ne passent pas par le sign-in
    return UserRepository(session).create(
        username=username, email=f"{username}@example.com", hashed_password="x"
    )


@pytest.fixture
def owner(session: Session) -> User:
    return _make_user(session, "alice")


@pytest.fixture
def other_owner(session: Session) -> User:
    return _make_user(session, "bob")


@pytest.fixture
def todo_svc(session: Session, versions: VersionAllocator) -> TodoService:
    return TodoService(TodoRepository(session), CategoryRepository(session), versions)


@pytest.fixture
def category_svc(session: Session, versions: VersionAllocator) -> CategoryService:
    return CategoryService(CategoryRepository(session), versions)


@pytest.fixture
def settings_svc(session: Session, versions: VersionAllocator) -> SettingsService:
    return SettingsService(UserSettingsRepository(session), versions)


@pytest.fixture
def resolver(
    session: Session,
    todo_svc: TodoService,
    category_svc: CategoryService,
    settings_svc: SettingsService,
) -> ConflictResolver:
    return ConflictResolver(session, todos=todo_svc, categories=category_svc, settings=settings_svc)


@pytest.fixture
def reader(session: Session) -> IncrementalSyncReader:
    return IncrementalSyncReader(
        todo_repo=TodoRepository(session),
        category_repo=CategoryRepository(session),
        settings_repo=UserSettingsRepository(session),
        clock_repo=SyncClockRepository(session),
    )


@pytest.fixture
def sync_svc(
    reader: IncrementalSyncReader, resolver: ConflictResolver, versions: VersionAllocator
) -> SyncService:
    return SyncService(reader=reader, resolver=resolver, versions=versions)


# ---------- HTTP ----------

@pytest.fixture
def client(engine: Engine) -> TestClient:
    """Test client on the isolated engine (API tests do not touch `session`)."""
    return TestClient(create_app(engine=engine))


def register(client: TestClient, username: str, password: str = "secret123") -> dict[str, str]:
    """Create an account and return bearer headers for it."""
    response = client.post(
        "/api/v1/auth/sign-up",
        json={"username": username, "email": f"{username}@example.com", "password": password},
    )
    assert response.status_code == 201, response.text
    response = client.post("/api/v1/auth/sign-in", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client: TestClient) -> dict[str, str]:
    return register(client, "alice")


@pytest.fixture
def other_headers(client: TestClient) -> dict[str, str]:
    return register(client, "bob")
