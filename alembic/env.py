"""Migrations for blog_posts and onboarding, against DATABASE_URL (sync driver)."""
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from content_hub.config import settings
from content_hub.models.db_models import Base

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

if not settings.database_url_sync.strip():
    raise ValueError("DATABASE_URL is not set; add the Supabase connection string to .env")
config.set_main_option("sqlalchemy.url", settings.database_url_sync)


def _configure(**kwargs) -> None:
    context.configure(target_metadata=Base.metadata, compare_type=True, **kwargs)
    with context.begin_transaction():
        context.run_migrations()


if context.is_offline_mode():
    _configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
else:
    engine = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with engine.connect() as connection:
        _configure(connection=connection)
