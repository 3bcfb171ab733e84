# app/config/database.py
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from .settings import settings


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Crear engine según el dialecto (SQLite local o PostgreSQL)"""
    engine_kwargs = {"echo": echo}

    if database_url.startswith("sqlite"):
        # Las sesiones se usan desde el threadpool de FastAPI
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    else:
        engine_kwargs["pool_pre_ping"] = True
        engine_kwargs["pool_recycle"] = 300

    return create_engine(database_url, **engine_kwargs)


# Create engine
engine = build_engine(settings.database_url_with_ssl, echo=settings.debug)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def init_db(bind: Engine = None) -> None:
    """
    Sincronizar el esquema al arrancar.

    create_all solo crea las tablas que faltan: nunca borra datos existentes.
    """
    # Registrar los modelos en Base.metadata
    from app.shared.database import models  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)


# Database dependency
def get_db():
    """Database dependency for FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
