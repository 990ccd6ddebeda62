# dashboard/db/engine.py

from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine

from dashboard.config import DATABASE_URL


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    # SQLite ignores REFERENCES clauses unless asked per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(url: Optional[str] = None) -> Engine:
    """
    Build an engine for the configured store.

    The engine is created once by the application factory and handed to every
    action explicitly; nothing here keeps a module-level connection around.
    """
    # echo=True if you want to see SQL printed in the terminal
    engine = create_engine(url or DATABASE_URL, future=True)

    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)

    return engine
