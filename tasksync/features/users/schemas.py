"""
➡️ But : Définir les formats de sortie des comptes utilisateur.

UserOut → réponse de l'API (sign-up, /auth/me, sign-in)

Sépare les modèles "de stockage" (ORM) de ceux "de transfert" (I/O API).

🔹 Avantages :

Empêche d'exposer par erreur des infos sensibles (ex: hash de mot de passe).
"""

from datetime import datetime
from typing import Optional

from pydantic import field_serializer
from sqlmodel import SQLModel

from tasksync.utils.timestamps import format_rfc3339


class UserOut(SQLModel):
    id: int
    username: str
    email: str
    # hashed_password: jamais exposé
    created_at: datetime

    @field_serializer("created_at")
    def _rfc3339(self, value: datetime) -> Optional[str]:
        return format_rfc3339(value)
