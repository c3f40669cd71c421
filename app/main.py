"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l'instance FastAPI (app).

Configure :

les logs (app.core.logging)

CORS (une seule origine autorisée : settings.CORS_ORIGIN)

titre, version, tags, Swagger sur /api-docs

schéma OpenAPI personnalisé

Inclut le router /api/tutorials et la route d'accueil "/".

Ouvre la base au démarrage (init_db) et la ferme à l'arrêt (close_db).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d'exécution : python -m app.main (ou uvicorn app.main:app --reload).
"""

import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging import configure_logging
from app.core.openapi import custom_openapi
from app.db.session import init_db, close_db
from app.features.tutorials.schemas import MessageOut

from app.api.routers import tutorials

import uvicorn

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("app.api")

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/api-docs",
    openapi_tags=[
        {"name": "tutorials", "description": "CRUD sur les tutoriels"},
    ],
)

# CORS : une seule origine (le front)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.CORS_ORIGIN], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    req_id = request.headers.get("X-Request-ID", uuid.uuid4().hex)
    request.state.request_id = req_id
    started = time.perf_counter()
    try:
        response = await call_next(request)
    except Exception:
        logger.exception("request_failed %s %s request_id=%s", request.method, request.url.path, req_id)
        raise
    response.headers["X-Request-ID"] = req_id
    elapsed_ms = round((time.perf_counter() - started) * 1000.0, 2)
    logger.info(
        "%s %s -> %s (%sms) request_id=%s",
        request.method, request.url.path, response.status_code, elapsed_ms, req_id,
    )
    return response

# Routers
app.include_router(tutorials.router, prefix="/api")

# Route d'accueil
@app.get("/", response_model=MessageOut, include_in_schema=False)
def welcome():
    return {"message": "Welcome to the tutorials application."}

# Génération du schéma OpenAPI custom (facultatif, mais propre)
app.openapi = lambda: custom_openapi(app)

# Démarrage / arrêt
@app.on_event("startup")
def on_startup():
    init_db()

@app.on_event("shutdown")
def on_shutdown():
    close_db()

if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT) # http://localhost:8080
