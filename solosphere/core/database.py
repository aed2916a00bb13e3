import logging
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from solosphere.core.config import settings

logger = logging.getLogger(__name__)

# One engine per process; every request borrows a session from its pool
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using them
    pool_size=10,
    max_overflow=20
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """
    Initialize database.

    Imports the models so they are registered on Base.metadata. Tables are
    only created when AUTO_CREATE_TABLES is enabled (or an explicit bind is
    given), so importing the app never opens a connection on its own.
    """
    from solosphere.models import job, bid  # noqa: F401  Import models to register them

    if bind is None and not settings.AUTO_CREATE_TABLES:
        return

    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables created")
