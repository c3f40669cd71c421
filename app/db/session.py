"""
➡️ But : Configurer la base (SQLite par défaut) et gérer les sessions de base de données.

engine : connexion à la base (sqlite:///tutorials.db par défaut).

init_db() : crée les tables à partir des modèles SQLModel (au démarrage).

close_db() : libère le pool de connexions (à l'arrêt).

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Réutilisable par injection (Depends(get_session)) et remplaçable en test
(app.dependency_overrides[get_session]).
"""

import logging
from typing import Dict, Any, Iterator, Optional
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from app.db.models.tutorials import Tutorial  # noqa: F401

from app.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: Optional[str] = None, *, echo: Optional[bool] = None, **kwargs: Any) -> Engine:
    url = url or settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = kwargs.pop("connect_args", {})
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args.setdefault("check_same_thread", False)

    # echo seulement en dev pour ne pas polluer les logs en prod
    engine = create_engine(
        url,
        echo=settings.DB_ECHO if echo is None else echo,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
        **kwargs,
    )
    return engine

engine: Engine = build_engine()

def init_db(bind: Optional[Engine] = None) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod, préfère des migrations.
    """
    bind = bind or engine
    SQLModel.metadata.create_all(bind)
    logger.info("Database ready (%s)", bind.url.render_as_string(hide_password=True))


def close_db(bind: Optional[Engine] = None) -> None:
    """Ferme toutes les connexions du pool (appelée à l'arrêt du serveur)."""
    bind = bind or engine
    bind.dispose()
    logger.info("Database connections closed")


def get_session() -> Iterator[Session]:
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
