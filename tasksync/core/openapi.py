"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée des conventions de synchro,

centraliser la personnalisation du Swagger.
"""

from fastapi.openapi.utils import get_openapi

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de tâches multi-utilisateurs avec synchronisation hors-ligne.\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC, au format RFC3339 (`2025-01-31T13:45:00.123Z`).\n"
            "- Pagination: query params `page` & `size`.\n"
            "- Authentification: `Authorization: Bearer <access_token>` (voir `/api/v1/auth/sign-in`).\n"
            "- `sync_version` : entier 64 bits strictement croissant par utilisateur ; "
            "c'est la seule clé d'ordre de la synchro.\n"
            "- Un lot (`/sync/batch`) renvoie toujours 200 ; chaque item a son propre résultat "
            "(`created`, `updated`, `deleted`, `conflict`, `error`).\n"
        ),
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
