"""
➡️ But : Logique métier des catégories.

- Nom unique par owner parmi les catégories non supprimées : vérifié avant écriture,
  et garanti par l'index unique partiel (l'IntegrityError remonte en DuplicateNameError).
- Suppression = drapeau is_deleted + nouvelle version, la ligne reste en base.
- Les tâches qui pointent vers une catégorie supprimée gardent leur référence.
"""

import logging
from typing import Optional, Sequence

from tasksync.core.errors import DuplicateNameError, NotFoundError
from tasksync.db.models.categories import Category
from tasksync.db.repositories.categories import CategoryRepository
from tasksync.features.categories.schemas import CategoryCreateIn, CategoryUpdateIn
from tasksync.features.sync.versions import VersionAllocator

logger = logging.getLogger(__name__)


class CategoryService:
    def __init__(self, repo: CategoryRepository, versions: VersionAllocator):
        self.repo = repo
        self.versions = versions

    # -------- Reads --------

    def list(self, owner_id: int) -> Sequence[Category]:
        return self.repo.list_active(owner_id)

    def get(self, owner_id: int, category_id: int) -> Category:
        category = self.repo.get_for_owner(category_id, owner_id, include_deleted=False)
        if not category:
            raise NotFoundError("category not found")
        return category

    def find(self, owner_id: int, category_id: int) -> Optional[Category]:
        return self.repo.get_for_owner(category_id, owner_id)

    # -------- Writes (CRUD) --------

    def create(self, owner_id: int, payload: CategoryCreateIn) -> Category:
        return self.create_fields(owner_id, **payload.model_dump())

    def update(self, owner_id: int, category_id: int, payload: CategoryUpdateIn) -> Category:
        category = self.get(owner_id, category_id)
        return self.apply_fields(category, **payload.model_dump(exclude_unset=True, exclude_none=True))

    def delete(self, owner_id: int, category_id: int) -> None:
        self.soft_delete(self.get(owner_id, category_id))

    # -------- Writes (bas niveau, partagées avec la synchro) --------

    def create_fields(self, owner_id: int, *, is_deleted: bool = False, **fields) -> Category:
        if not is_deleted:
            self._assert_name_free(owner_id, fields["name"])
        stamp = self.versions.next_version(owner_id)
        category = self.repo.create(
            owner_id=owner_id, is_deleted=is_deleted, **stamp.as_fields(created=True), **fields
        )
        logger.debug("category %s created for owner %s (v%s)", category.id, owner_id, category.sync_version)
        return category

    def apply_fields(self, category: Category, **changes) -> Category:
        if not changes.get("is_deleted", category.is_deleted):
            self._assert_name_free(
                category.owner_id, changes.get("name", category.name), exclude_id=category.id
            )
        stamp = self.versions.next_version(category.owner_id)
        return self.repo.update(category, **stamp.as_fields(), **changes)

    def soft_delete(self, category: Category) -> Category:
        stamp = self.versions.next_version(category.owner_id)
        category = self.repo.update(category, is_deleted=True, **stamp.as_fields())
        logger.debug("category %s deleted for owner %s (v%s)", category.id, category.owner_id, category.sync_version)
        return category

    # -------- Helpers --------

    def _assert_name_free(self, owner_id: int, name: str, *, exclude_id: Optional[int] = None) -> None:
        if self.repo.exists_active_name(owner_id, name, exclude_id=exclude_id):
            raise DuplicateNameError(f"category name already exists: {name}")
