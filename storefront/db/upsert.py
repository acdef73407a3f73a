# storefront/db/upsert.py
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session


def dialect_insert(db: Session, model):
    """
    Returns an INSERT construct that supports ON CONFLICT for the dialect
    the session is bound to.
    """
    dialect_name = db.get_bind().dialect.name
    if dialect_name == "sqlite":
        return sqlite.insert(model)
    if dialect_name == "postgresql":
        return postgresql.insert(model)
    raise NotImplementedError(f"Upserts are not supported for dialect '{dialect_name}'")
