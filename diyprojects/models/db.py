# diyprojects DB adapter
# Rev 0.2.0

"""Connection provider and transaction scope.
- One fresh connection per operation (NullPool, nothing is reused)
- tx() wraps begin/commit/rollback and always closes the connection
"""
from __future__ import annotations
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from .errors import DbConnectionError, PersistenceError
from ..utils.logging_setup import get_logger


@dataclass(frozen=True)
class DbSettings:
    """Fixed connection parameters (host, port, schema, credentials)."""
    drivername: str = "mysql+pymysql"
    host: str | None = "localhost"
    port: int | None = 3306
    schema: str | None = "projects"
    user: str | None = "projects"
    password: str | None = "projects"
    query: Dict[str, str] = field(default_factory=dict)

    def url(self) -> URL:
        return URL.create(
            self.drivername,
            username=self.user,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.schema,
            query=self.query,
        )


class ConnectionProvider:
    """Opens a new connection on every acquire()."""

    def __init__(self, settings: DbSettings):
        self._log = get_logger("db")
        self.settings = settings
        self._url = settings.url()
        self._engine: Engine | None = None

    @property
    def display_url(self) -> str:
        return self._url.render_as_string(hide_password=True)

    def _get_engine(self) -> Engine:
        if self._engine is None:
            try:
                self._engine = create_engine(self._url, poolclass=NullPool)
            except (SQLAlchemyError, ImportError) as e:
                # unknown dialect or missing DBAPI driver
                raise DbConnectionError(self.display_url) from e
        return self._engine

    def acquire(self) -> Connection:
        engine = self._get_engine()
        try:
            conn = engine.connect()
        except SQLAlchemyError as e:
            self._log.error("Connection failed: %s (%s)", self.display_url, e)
            raise DbConnectionError(self.display_url) from e
        self._log.debug("Connection open %s", self.display_url)
        return conn

    def dispose(self) -> None:
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None


@contextmanager
def tx(provider: ConnectionProvider) -> Iterator[Connection]:
    """Scoped acquisition: begin, yield, commit; roll back on any failure."""
    log = get_logger("db.tx")
    conn = provider.acquire()
    try:
        try:
            trans = conn.begin()
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
        try:
            yield conn
            trans.commit()
            log.debug("Transaction committed")
        except Exception as e:
            try:
                trans.rollback()
            except SQLAlchemyError as rollback_error:
                log.error("Rollback failed: %s (original error: %s)", rollback_error, e)
            else:
                log.warning("Transaction rolled back: %s", e)
            if isinstance(e, PersistenceError):
                raise
            raise PersistenceError(str(e)) from e
    finally:
        conn.close()
