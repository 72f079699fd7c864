"""
➡️ But : Centraliser tous les paramètres configurables (nom d’app, base, secrets JWT, logs, valeurs par défaut des réglages utilisateur).

Utilise pydantic-settings pour charger automatiquement les variables d’environnement (.env, variables système…).

Fournit un objet settings unique, que tu importes ailleurs :

from tasksync.core.config import settings
print(settings.APP_NAME)


🔹 Avantages :

Plus propre que des constantes éparpillées dans le code.

Facilite le passage entre environnements (dev / prod / test).
"""

from datetime import timedelta
from typing import List, Optional

from pydantic_settings import BaseSettings
from tasksync.security.tokens import JWTSettings


class Settings(BaseSettings):
    # -----------------------------
    # App
    # -----------------------------
    APP_NAME: str = "tasksync"
    ENV: str = "dev"  # dev | prod | test

    # -----------------------------
    # DB
    # -----------------------------
    SQLITE_PATH: str = "tasksync.db"  # fichier SQLite
    # Si tu veux forcer une URL différente (ex: Postgres), définis DATABASE_URL dans l'env.
    DATABASE_URL: Optional[str] = None
    DB_ECHO: bool = False

    # -----------------------------
    # JWT / Auth
    # -----------------------------
    JWT_SECRET_KEY: str = "CHANGE_ME"     # ⚠️ change en prod
    JWT_ISSUER: str = "tasksync"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TTL_MINUTES: int = 24 * 60     # 24h, comme le service d'origine

    # -----------------------------
    # Logs
    # -----------------------------
    LOG_LEVEL: str = "INFO"
    LOG_PATH: Optional[str] = None        # fichier de log en plus de stdout

    # -----------------------------
    # HTTP
    # -----------------------------
    CORS_ALLOW_ORIGINS: List[str] = ["*"]
    PAGE_SIZE_MAX: int = 100

    # -----------------------------
    # Réglages utilisateur par défaut (création paresseuse)
    # -----------------------------
    DEFAULT_THEME: str = "light"
    DEFAULT_NOTIFICATION_TIME: str = "09:00:00"
    DEFAULT_LANGUAGE: str = "zh-CN"
    DEFAULT_TIMEZONE: str = "Asia/Shanghai"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
    }

    # -----------------------------
    # Post-process values
    # -----------------------------
    def model_post_init(self, __context): # appelée automatiquement
        # DATABASE_URL par défaut depuis SQLITE_PATH si non fourni
        if not self.DATABASE_URL:
            object.__setattr__(self, "DATABASE_URL", f"sqlite:///{self.SQLITE_PATH}")


# Instance globale importable partout
settings = Settings()

# Objet JWT prêt à l'emploi pour les services
jwt_settings = JWTSettings(
    secret=settings.JWT_SECRET_KEY,
    issuer=settings.JWT_ISSUER,
    algorithm=settings.JWT_ALGORITHM,
    access_ttl=timedelta(minutes=settings.ACCESS_TTL_MINUTES),
)
