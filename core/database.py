"""Database engine and session management."""

import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.settings import get_settings
from core.models import Base

logger = logging.getLogger(__name__)

settings = get_settings()

engine = create_engine(
    settings.database_url,
    connect_args={"check_same_thread": False} if settings.database_url.startswith("sqlite") else {},
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    # Register every table on Base.metadata before create_all
    import modules.categorias.models  # noqa: F401
    import modules.ordenes_trabajo.models  # noqa: F401
    import modules.usuarios.models  # noqa: F401
    import modules.vehiculos.models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready")
