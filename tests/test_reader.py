"""Tests for incremental pull."""

from __future__ import annotations

from tasksync.db.models.users import User
from tasksync.features.categories.services import CategoryService
from tasksync.features.settings.services import SettingsService
from tasksync.features.sync.reader import IncrementalSyncReader
from tasksync.features.sync.services import SyncService
from tasksync.features.todos.services import TodoService


class TestPull:
    def test_empty_owner(self, reader: IncrementalSyncReader, owner: User) -> None:
        snapshot = reader.pull(owner.id, 0)
        assert list(snapshot.todos) == []
        assert list(snapshot.categories) == []
        assert snapshot.settings is None
        assert snapshot.server_version == 0

    def test_since_zero_returns_everything_including_deleted(
        self,
        reader: IncrementalSyncReader,
        todo_svc: TodoService,
        category_svc: CategoryService,
        settings_svc: SettingsService,
        owner: User,
    ) -> None:
        keep = todo_svc.create_fields(owner.id, title="keep")
        drop = todo_svc.create_fields(owner.id, title="drop")
        todo_svc.delete(owner.id, drop.id)
        category = category_svc.create_fields(owner.id, name="Work")
        category_svc.soft_delete(category)
        settings = settings_svc.get(owner.id)

        snapshot = reader.pull(owner.id, 0)
        assert [t.id for t in snapshot.todos] == [keep.id, drop.id]
        assert snapshot.todos[1].is_deleted is True
        assert [c.is_deleted for c in snapshot.categories] == [True]
        assert snapshot.settings.owner_id == owner.id
        assert snapshot.server_version == settings.sync_version

    def test_rows_are_ordered_by_version(self, reader: IncrementalSyncReader, todo_svc: TodoService, owner: User) -> None:
        a = todo_svc.create_fields(owner.id, title="a")
        b = todo_svc.create_fields(owner.id, title="b")
        todo_svc.apply_fields(a, title="a2")
        versions = [t.sync_version for t in reader.pull(owner.id, 0).todos]
        assert versions == sorted(versions)
        assert [t.id for t in reader.pull(owner.id, 0).todos] == [b.id, a.id]

    def test_since_server_version_is_empty(
        self, reader: IncrementalSyncReader, todo_svc: TodoService, settings_svc: SettingsService, owner: User
    ) -> None:
        todo_svc.create_fields(owner.id, title="a")
        settings_svc.get(owner.id)
        ceiling = reader.pull(owner.id, 0).server_version

        snapshot = reader.pull(owner.id, ceiling)
        assert list(snapshot.todos) == []
        assert list(snapshot.categories) == []
        assert snapshot.settings is None
        assert snapshot.server_version == ceiling

    def test_only_newer_rows(self, reader: IncrementalSyncReader, todo_svc: TodoService, owner: User) -> None:
        old = todo_svc.create_fields(owner.id, title="old")
        new = todo_svc.create_fields(owner.id, title="new")
        assert [t.id for t in reader.pull(owner.id, old.sync_version).todos] == [new.id]

    def test_other_owners_rows_are_invisible(
        self, reader: IncrementalSyncReader, todo_svc: TodoService, owner: User, other_owner: User
    ) -> None:
        todo_svc.create_fields(other_owner.id, title="theirs")
        snapshot = reader.pull(owner.id, 0)
        assert list(snapshot.todos) == []
        assert snapshot.server_version == 0


class TestSyncServicePull:
    def test_wire_shape(self, sync_svc: SyncService, todo_svc: TodoService, owner: User) -> None:
        todo = todo_svc.create_fields(owner.id, title="a", tags=["x"])
        response = sync_svc.pull(owner.id, 0)
        assert response.server_version == todo.sync_version
        assert response.settings is None
        [item] = response.todos
        assert (item.id, item.title, item.tags, item.sync_version) == (todo.id, "a", ["x"], todo.sync_version)
        assert item.updated_at.endswith("Z")

    def test_version_matches_pull(self, sync_svc: SyncService, todo_svc: TodoService, owner: User) -> None:
        todo_svc.create_fields(owner.id, title="a")
        assert sync_svc.version(owner.id) == sync_svc.pull(owner.id, 0).server_version
