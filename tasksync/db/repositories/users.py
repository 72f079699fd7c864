"""
➡️ But : Encapsuler toutes les opérations de base de données.

UserRepository : lecture/création sur la table User.

Ne contient aucune logique métier, juste de la persistance.
"""

from typing import Optional
from sqlmodel import select

from tasksync.db.repositories.base import BaseRepository
from tasksync.db.models.users import User

class UserRepository(BaseRepository[User]):
    """
    Repository pour la table User.
    Hérite du CRUD générique de BaseRepository.
    Contient uniquement les requêtes spécifiques à User.
    """
    model = User

    def get_by_username(self, username: str) -> Optional[User]:
        """Retourne un utilisateur par son nom d'utilisateur."""
        return self.session.exec(
            select(self.model).where(self.model.username == username)
        ).first()

    def get_by_email(self, email: str) -> Optional[User]:
        return self.session.exec(
            select(self.model).where(self.model.email == email)
        ).first()
