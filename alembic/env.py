"""
Alembic environment for the storefront promotions service.

The database URL comes from application Settings, never from alembic.ini.
Only tables in MANAGED_SCHEMAS take part in autogenerate comparisons.
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool, text

from alembic import context

from app.config.settings import get_settings
from app.models.db.base import Base
from app.models.db.discount_rules import DiscountRuleModel  # noqa: F401  registers the table
from app.models.db.schemas import DEFAULT_SEARCH_PATH, MANAGED_SCHEMAS

config = context.config
config.set_main_option("sqlalchemy.url", get_settings().database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)


def include_object(obj, name, type_, reflected, compare_to):
    if type_ != "table":
        return True
    return (getattr(obj, "schema", None) or "public") in MANAGED_SCHEMAS


def _common_options() -> dict:
    return {
        "target_metadata": Base.metadata,
        "compare_type": True,
        "compare_server_default": True,
        "include_schemas": True,
        "include_object": include_object,
        "version_table_schema": "public",
    }


def run_migrations_offline() -> None:
    """Emit migration SQL to stdout without connecting."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_common_options(),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with engine.connect() as connection:
        connection.execute(text(f"SET search_path TO {DEFAULT_SEARCH_PATH}"))
        connection.commit()

        context.configure(connection=connection, transaction_per_migration=True, **_common_options())
        context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
