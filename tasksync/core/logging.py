"""Configuration des logs : stdout + fichier optionnel, sur le logger racine `tasksync`."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", log_path: Optional[str] = None) -> None:
    """Configure le logger `tasksync` (idempotent : ne duplique pas les handlers).

    Args:
        level: niveau de log (DEBUG, INFO, …).
        log_path: si fourni, les logs (y compris ceux d'uvicorn) sont aussi écrits dans ce fichier.
    """
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger("tasksync")
    root_logger.setLevel(level.upper())

    if getattr(root_logger, "_tasksync_configured", False):
        return

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    root_logger.addHandler(stdout_handler)

    if log_path:
        path = Path(log_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        for uvicorn_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            logging.getLogger(uvicorn_name).addHandler(file_handler)

    root_logger._tasksync_configured = True  # type: ignore[attr-defined]
