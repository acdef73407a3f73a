# storefront/db/session.py
import os

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from storefront.core.config import settings

Base = declarative_base()


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores ON DELETE CASCADE unless the pragma is set per connection."""

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(database_url: str, **engine_kwargs) -> Engine:
    if database_url.startswith("sqlite"):
        engine = create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            **engine_kwargs,
        )
        enable_sqlite_foreign_keys(engine)
        return engine
    return create_engine(database_url, pool_pre_ping=True, **engine_kwargs)


def init_db(bind: Engine) -> None:
    """Creates the SQLite folder (if any) and all tables. Called once at startup."""
    # Models must be imported so that they are registered on Base.metadata
    from storefront.models.user import User  # noqa: F401
    from storefront.models.product import Product  # noqa: F401
    from storefront.models.cart import CartItem, WishlistItem  # noqa: F401

    url = bind.url
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)
    Base.metadata.create_all(bind=bind)


# Engines connect lazily: nothing touches the database until the first session is used.
engine = build_engine(settings.DATABASE_URL)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
