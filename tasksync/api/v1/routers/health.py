from fastapi import APIRouter

from tasksync.core.config import settings

router = APIRouter(tags=["health"])

@router.get("/health", summary="Vérifier que le service répond")
def health():
    return {"status": "ok", "app": settings.APP_NAME}
