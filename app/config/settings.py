# app/config/settings.py
from pydantic_settings import BaseSettings
from typing import List
import os

# Esquemas que SQLAlchemy resolvería a psycopg2, que no es dependencia
POSTGRES_SCHEMES = ("postgres://", "postgresql://")

class Settings(BaseSettings):
    # App Info
    app_name: str = "DNCommerce API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database - SQLite local por defecto, PostgreSQL en producción
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./database.sqlite")

    # Server
    host: str = "0.0.0.0"
    port: int = int(os.getenv("PORT", 3000))
    cors_origins: List[str] = ["*"]

    # Ventas - reintentos ante fallas transitorias de la BD
    sale_max_retries: int = 3
    sale_retry_backoff_seconds: float = 0.05

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    # SSL para PostgreSQL en producción
    @property
    def database_url_with_ssl(self) -> str:
        """
        URL lista para create_engine.

        - postgres:// y postgresql:// usan el driver psycopg (v3) instalado
        - Agregar SSL para conexiones de producción (Render)
        """
        url = self.database_url
        for scheme in POSTGRES_SCHEMES:
            if url.startswith(scheme):
                url = "postgresql+psycopg://" + url[len(scheme):]
                break

        if url and "render" in url and "sslmode=" not in url:
            separator = "&" if "?" in url else "?"
            return f"{url}{separator}sslmode=require"
        return url

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = 'ignore'

settings = Settings()
