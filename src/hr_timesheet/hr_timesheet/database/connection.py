from __future__ import annotations

import logging
from dataclasses import dataclass

import mysql.connector
from mysql.connector.constants import ClientFlag

from ..core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass
class DBConfig:
    host: str
    port: int
    user: str
    password: str
    database: str

    @classmethod
    def from_dict(cls, db_config: dict) -> "DBConfig":
        return cls(
            host=str(db_config.get("host", "localhost")),
            port=int(db_config.get("port", 3306)),
            user=str(db_config.get("user", "root")),
            password=str(db_config.get("password", "")),
            database=str(db_config.get("database", "nhansu_db")),
        )

    def describe(self) -> str:
        return f"{self.user}@{self.host}:{self.port}/{self.database}"


class DatabaseConnection:
    """Storage client handed to every repository.

    Built once at process start and closed on shutdown. Each operation opens a
    short-lived connection (safe for simple Flask apps); after ``close()`` no
    new connection is handed out.
    """

    def __init__(self, config: DBConfig):
        self._config = config
        self._closed = False

    @property
    def config(self) -> DBConfig:
        return self._config

    @property
    def closed(self) -> bool:
        return self._closed

    def connect(self):
        if self._closed:
            raise StorageError("Kết nối CSDL đã đóng")
        try:
            return mysql.connector.connect(
                host=self._config.host,
                port=int(self._config.port),
                user=self._config.user,
                password=self._config.password,
                database=self._config.database,
                # UPDATE rowcount reports matched rows, not changed rows
                client_flags=[ClientFlag.FOUND_ROWS],
            )
        except mysql.connector.Error as e:
            logger.exception("Cannot connect to %s", self._config.describe())
            raise StorageError(str(e)) from e

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            logger.info("Database connection closed (%s)", self._config.describe())
