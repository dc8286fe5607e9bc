from __future__ import annotations

import logging
from dataclasses import dataclass

import mysql.connector

from ..core.constants import DEFAULT_DB_TIMEOUT_SECONDS
from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str
    timeout_seconds: int = DEFAULT_DB_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, db_config: dict, *, timeout_seconds: int | None = None) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "attendance_db")),
            timeout_seconds=int(timeout_seconds or db_config.get("timeout_seconds", DEFAULT_DB_TIMEOUT_SECONDS)),
        )


class DatabaseConnection:
    """DB connection factory with an explicit open/close lifecycle.

    Note: We create short-lived connections per operation (safe for simple Flask apps).
    ``connection_timeout`` bounds both connect and each statement round-trip
    (pure-Python connector only, hence ``use_pure=True``).
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._open = False

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def is_open(self) -> bool:
        return self._open

    def open(self) -> None:
        conn = self._raw_connect()
        conn.close()
        self._open = True
        logger.info(
            "Connected to MySQL %s@%s:%s/%s",
            self._config.user,
            self._config.host,
            self._config.port,
            self._config.database,
        )

    def close(self) -> None:
        self._open = False

    def connect(self):
        if not self._open:
            raise StorageError("Database connection is closed")
        return self._raw_connect()

    def _raw_connect(self):
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
                connection_timeout=int(self._config.timeout_seconds),
                use_pure=True,
            )
        except mysql.connector.Error as exc:
            raise StorageError(f"Could not connect to database: {exc}") from exc
