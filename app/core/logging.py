"""
➡️ But : Configurer les logs de l'application (module standard `logging`).

configure_logging() est appelée une seule fois au chargement de app.main.
Chaque module récupère ensuite son logger : logging.getLogger(__name__).
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    # Ne pas écraser une config existante (uvicorn, pytest…)
    if not root.handlers:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    else:
        root.setLevel(level.upper())
