from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from contract_hub.config import settings


class Base(DeclarativeBase):
    pass


def get_engine(database_url: str | None = None):
    url = database_url or settings.database_url
    if url.startswith("sqlite"):
        # SQLite pools do not take sizing options; FastAPI runs sync routes in a threadpool.
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_timeout=settings.db_pool_timeout,
        pool_recycle=settings.db_pool_recycle,
    )


SessionLocal = sessionmaker(bind=get_engine(), autoflush=False, autocommit=False)


def get_db():
    """Centralized database session dependency for FastAPI.

    Yields a database session and ensures it is closed after the request.

    Example:
        @router.get("/contracts")
        def list_contracts(db: Session = Depends(get_db)):
            return contracts_service.contracts.list(db, ...)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
