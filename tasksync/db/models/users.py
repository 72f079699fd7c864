"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les comptes : chaque ligne User est l'"owner" des todos, catégories et réglages.
"""

from sqlmodel import Field

from .base import BaseModelDB

class User(BaseModelDB, table=True):
    username: str = Field(index=True, unique=True, max_length=50)
    email: str = Field(index=True, unique=True, max_length=100)
    hashed_password: str
