"""Tests for the per-owner version allocator."""

from __future__ import annotations

from collections.abc import Callable

from sqlmodel import Session

from tasksync.db.models.users import User
from tasksync.features.sync.versions import VersionAllocator
from tasksync.features.todos.services import TodoService
from tasksync.utils.timestamps import from_millis


def frozen(ms: int) -> Callable[[], int]:
    return lambda: ms


class TestNextVersion:
    def test_first_version_is_the_wall_clock(self, session: Session, owner: User) -> None:
        stamp = VersionAllocator(session, clock=frozen(5_000)).next_version(owner.id)
        assert stamp.version == 5_000
        assert stamp.timestamp == from_millis(5_000)

    def test_same_millisecond_writes_get_distinct_versions(self, session: Session, owner: User) -> None:
        allocator = VersionAllocator(session, clock=frozen(5_000))
        versions = [allocator.next_version(owner.id).version for _ in range(3)]
        assert versions == [5_000, 5_001, 5_002]

    def test_clock_going_backwards_never_lowers_the_version(self, session: Session, owner: User) -> None:
        readings = iter([5_000, 1_000])
        allocator = VersionAllocator(session, clock=lambda: next(readings))
        first = allocator.next_version(owner.id)
        second = allocator.next_version(owner.id)
        assert second.version == first.version + 1
        # l'horodatage reste l'heure murale, seule la version est corrigée
        assert second.timestamp == from_millis(1_000)

    def test_strictly_increasing_with_moving_clock(self, versions: VersionAllocator, owner: User) -> None:
        values = [versions.next_version(owner.id).version for _ in range(10)]
        assert values == sorted(values)
        assert len(set(values)) == len(values)

    def test_owners_have_independent_counters(self, session: Session, owner: User, other_owner: User) -> None:
        allocator = VersionAllocator(session, clock=frozen(5_000))
        allocator.next_version(owner.id)
        allocator.next_version(owner.id)
        assert allocator.next_version(other_owner.id).version == 5_000

    def test_rolled_back_stamp_is_not_consumed(self, session: Session, owner: User) -> None:
        allocator = VersionAllocator(session, clock=frozen(5_000))
        assert allocator.next_version(owner.id).version == 5_000
        session.rollback()
        assert allocator.next_version(owner.id).version == 5_000


class TestCurrent:
    def test_zero_when_owner_has_no_data(self, versions: VersionAllocator, owner: User) -> None:
        assert versions.current(owner.id) == 0

    def test_follows_latest_write(
        self, versions: VersionAllocator, todo_svc: TodoService, owner: User
    ) -> None:
        todo = todo_svc.create_fields(owner.id, title="a")
        assert versions.current(owner.id) == todo.sync_version
        todo = todo_svc.apply_fields(todo, completed=True)
        assert versions.current(owner.id) == todo.sync_version
