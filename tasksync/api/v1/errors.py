"""Traduction des erreurs métier en réponses HTTP, partagée par les routers."""

from fastapi import HTTPException, status

from tasksync.core.errors import (
    ConflictError,
    DuplicateNameError,
    InternalError,
    InvalidError,
    NotFoundError,
    TaskSyncError,
)

_STATUS_BY_ERROR = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (DuplicateNameError, status.HTTP_409_CONFLICT),
    (InvalidError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (InternalError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def to_http(error: TaskSyncError) -> HTTPException:
    for error_cls, code in _STATUS_BY_ERROR:
        if isinstance(error, error_cls):
            return HTTPException(status_code=code, detail=error.message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=error.message)
