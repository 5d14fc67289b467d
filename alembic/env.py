from logging.config import fileConfig
from alembic import context
import os, sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
from hr_api.config import DB_URL
from hr_api.models import Base

config = context.config

if config.config_file_name is not None and config.get_section("loggers"):
    fileConfig(config.config_file_name, disable_existing_loggers=False)

# Also write the URL into the config so other commands see it
if DB_URL and not config.get_main_option("sqlalchemy.url"):
    config.set_main_option("sqlalchemy.url", DB_URL)

target_metadata = Base.metadata

def run_migrations_offline():
    url = config.get_main_option("sqlalchemy.url") or DB_URL
    context.configure(url=url, target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()

def _run_with(connection):
    # render_as_batch keeps ALTERs portable to SQLite
    context.configure(connection=connection, target_metadata=target_metadata, render_as_batch=True)
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    from sqlalchemy import engine_from_config, pool

    # A caller (e.g. the test-suite) may hand over an open connection
    connection = config.attributes.get("connection")
    if connection is not None:
        _run_with(connection)
        return

    # With prefix="" the key must be **url** (not sqlalchemy.url)
    opts = {"url": config.get_main_option("sqlalchemy.url") or DB_URL}
    connectable = engine_from_config(opts, prefix="", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        _run_with(connection)

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
