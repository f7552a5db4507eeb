from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from app.core.config import settings

SQLALCHEMY_DATABASE_URL = settings.database_url

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    # pooled connections are checked before reuse, stale ones are replaced
    pool_pre_ping=True,
    connect_args={"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


# ----------------------------------------------------
# Engine Dependency
# ----------------------------------------------------
def get_engine() -> Engine:
    """
    Shared engine (and its connection pool) for request handlers.

    Tests override this to point the API at a throwaway database.
    """
    return engine
