"""
➡️ But : Taxonomie des erreurs métier, indépendante du web.

Les services lèvent ces exceptions ; les routers les traduisent en HTTPException
(voir tasksync.api.v1.errors) et la synchro par lot les capture item par item.

NotFoundError      -> lookup scopé par owner sans résultat
ConflictError      -> version/horodatage perdu face au serveur
DuplicateNameError -> nom de catégorie déjà utilisé par ce owner
InvalidError       -> payload client invalide (enum, horodatage illisible…)
InternalError      -> échec stockage / encodage
"""


class TaskSyncError(Exception):
    """Base de toutes les erreurs métier : porte un message lisible par l'utilisateur."""

    kind = "internal"

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or self.kind


class NotFoundError(TaskSyncError, LookupError):
    kind = "not_found"

    def __init__(self, message: str = "not found"):
        super().__init__(message)


class ConflictError(TaskSyncError):
    kind = "conflict"

    def __init__(self, message: str = "server version is newer", *, server_id: int = 0, server_version: int = 0):
        super().__init__(message)
        self.server_id = server_id
        self.server_version = server_version


class DuplicateNameError(TaskSyncError):
    kind = "duplicate_name"

    def __init__(self, message: str = "category name already exists"):
        super().__init__(message)


class InvalidError(TaskSyncError, ValueError):
    kind = "invalid"


class InternalError(TaskSyncError):
    kind = "internal"

    def __init__(self, message: str = "internal error"):
        super().__init__(message)
