"""
➡️ But : Définir les formats d'entrée/sortie de la synchro (couche validation).

Les horodatages circulent en chaîne RFC3339 (`2025-01-31T13:45:00.123Z`) et la
version en entier (64 bits). Les items sync portent le jeu complet de champs,
plus la version et l'updated_at que le client a vus en dernier.

Les champs énumérés (priority, theme) ne sont PAS contraints ici : un item invalide
doit produire un résultat "error" pour lui seul, pas un 422 sur tout le lot.
Le contrôle est fait item par item par le ConflictResolver.

🔹 Avantages :

Un seul endroit pour le format réseau, partagé par pull et batch.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

ResultType = Literal["todo", "category", "settings"]
ResultAction = Literal["created", "updated", "deleted", "conflict", "error"]


# ---------- Items ----------

class TodoSyncItem(BaseModel):
    id: int = 0  # 0 / absent => création
    title: str = ""
    description: str = ""
    completed: bool = False
    priority: int = 0
    due_date: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    category_id: Optional[int] = None
    reminder: Optional[str] = None
    is_deleted: bool = False
    sync_version: int = 0
    updated_at: str = ""


class CategorySyncItem(BaseModel):
    id: int = 0
    name: str = ""
    color: str = "#2196F3"
    icon: str = "folder"
    is_deleted: bool = False
    sync_version: int = 0
    updated_at: str = ""


class UserSettingsSyncItem(BaseModel):
    theme: str = "light"
    notification_time: str = "09:00:00"
    language: str = "zh-CN"
    timezone: str = "Asia/Shanghai"
    sync_version: int = 0
    updated_at: str = ""


# ---------- Pull ----------

class PullRequest(BaseModel):
    since: int = Field(0, ge=0, description="Dernière version serveur connue du client")


class PullResponse(BaseModel):
    todos: List[TodoSyncItem] = Field(default_factory=list)
    categories: List[CategorySyncItem] = Field(default_factory=list)
    settings: Optional[UserSettingsSyncItem] = None
    server_version: int = 0


# ---------- Batch ----------

class BatchSyncRequest(BaseModel):
    todos: List[TodoSyncItem] = Field(default_factory=list)
    categories: List[CategorySyncItem] = Field(default_factory=list)
    settings: Optional[UserSettingsSyncItem] = None


class SyncResult(BaseModel):
    type: ResultType
    local_id: int = 0
    server_id: int = 0
    action: ResultAction
    message: str = ""
    sync_version: int = 0


class BatchSyncResponse(BaseModel):
    success: List[SyncResult] = Field(default_factory=list)
    conflicts: List[SyncResult] = Field(default_factory=list)
    errors: List[SyncResult] = Field(default_factory=list)


# ---------- Version ----------

class VersionResponse(BaseModel):
    version: int
