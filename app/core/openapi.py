"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter un titre, une description détaillée,

déclarer le serveur de développement (http://localhost:PORT),

centraliser la personnalisation du Swagger.

🔹 Avantages :

La doc est toujours complète et cohérente.

Tu peux y ajouter des conventions d'API (formats, codes de retour, etc.).
"""

from fastapi.openapi.utils import get_openapi

from app.core.config import settings

def custom_openapi(app):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "A simple API to manage tutorials.\n\n"
            "### Conventions\n"
            "- Bodies are JSON; errors are `{\"message\": \"...\"}`.\n"
            "- Update / delete of an unknown id answer **200** with a message, not 404.\n"
            "- `GET /api/tutorials/{id}` answers an empty body when the id is unknown.\n"
        ),
        routes=app.routes,
        tags=app.openapi_tags,
        servers=[{"url": f"http://localhost:{settings.PORT}", "description": "Development server"}],
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
