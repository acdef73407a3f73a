# alembic/env.py

import sys
from os.path import abspath, dirname
# Project root on the path so that `storefront` imports resolve
sys.path.insert(0, abspath(dirname(dirname(__file__))))

from logging.config import fileConfig
from sqlalchemy.pool import NullPool
from alembic import context

# 1. Settings object that reads .env
from storefront.core.config import settings
# 2. Declarative base and engine factory
from storefront.db.session import Base, build_engine
# 3. All models, so that they are registered on the metadata
from storefront.models.user import User
from storefront.models.product import Product
from storefront.models.cart import CartItem, WishlistItem

# 4. Point Alembic at the metadata of our models
target_metadata = Base.metadata

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    context.configure(
        url=settings.DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        render_as_batch=settings.IS_SQLITE,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    # The URL always comes from settings, never from alembic.ini
    connectable = build_engine(settings.DATABASE_URL, poolclass=NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            render_as_batch=settings.IS_SQLITE,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
