import logging
import os
import pathlib
import sqlite3
import threading
from typing import List, Sequence

from featurebot.auth.user_role import UserRole
from featurebot.database.role_store import RoleStore

logger = logging.getLogger(__name__)

# Directory for bot databases when no explicit path is given
MAIN_ROOT = pathlib.Path(__file__).resolve().parents[2]
DB_DIR = os.path.join(MAIN_ROOT, "databases")


class DatabaseManager(RoleStore):
    """
    Thread-safe SQLite storage for roles, their restricted commands and
    their enrolled users. Creates the schema on initialization.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path
        self.lock = threading.Lock()
        self._initialize_database()
        logger.info(f"📦 Database initialized at {self.db_path}")

    @classmethod
    def for_bot(cls, bot_name: str) -> "DatabaseManager":
        """Open the database for a bot under the shared databases directory."""
        os.makedirs(DB_DIR, exist_ok=True)
        return cls(os.path.join(DB_DIR, f"bot_{bot_name}.db"))

    # -------------------------------------------------------------------------
    # Initialization and Connection
    # -------------------------------------------------------------------------
    def _connect(self):
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    def _initialize_database(self):
        """Create tables if not already existing."""
        with self._connect() as conn:
            c = conn.cursor()

            c.execute("""
                CREATE TABLE IF NOT EXISTS roles (
                    name TEXT PRIMARY KEY,
                    position INTEGER NOT NULL
                )
            """)

            c.execute("""
                CREATE TABLE IF NOT EXISTS role_commands (
                    role_name TEXT NOT NULL,
                    command_id TEXT NOT NULL,
                    position INTEGER NOT NULL,
                    PRIMARY KEY (role_name, command_id)
                )
            """)

            c.execute("""
                CREATE TABLE IF NOT EXISTS role_users (
                    role_name TEXT NOT NULL,
                    user TEXT NOT NULL,
                    position INTEGER NOT NULL,
                    PRIMARY KEY (role_name, user)
                )
            """)

            conn.commit()

    # -------------------------------------------------------------------------
    # Roles
    # -------------------------------------------------------------------------
    def load_roles(self) -> List[UserRole]:
        with self.lock, self._connect() as conn:
            c = conn.cursor()
            c.execute("SELECT name FROM roles ORDER BY position")
            roles = {row["name"]: UserRole(name=row["name"]) for row in c.fetchall()}

            c.execute("SELECT role_name, command_id FROM role_commands ORDER BY position")
            for row in c.fetchall():
                if row["role_name"] in roles:
                    roles[row["role_name"]].commands.append(row["command_id"])

            c.execute("SELECT role_name, user FROM role_users ORDER BY position")
            for row in c.fetchall():
                if row["role_name"] in roles:
                    roles[row["role_name"]].users.append(row["user"])

        return list(roles.values())

    def save_roles(self, roles: Sequence[UserRole]) -> None:
        with self.lock, self._connect() as conn:
            c = conn.cursor()
            c.execute("DELETE FROM role_users")
            c.execute("DELETE FROM role_commands")
            c.execute("DELETE FROM roles")

            c.executemany(
                "INSERT INTO roles (name, position) VALUES (?, ?)",
                [(role.name, i) for i, role in enumerate(roles)]
            )
            c.executemany(
                "INSERT INTO role_commands (role_name, command_id, position) VALUES (?, ?, ?)",
                [(role.name, cmd, i) for role in roles for i, cmd in enumerate(role.commands)]
            )
            c.executemany(
                "INSERT INTO role_users (role_name, user, position) VALUES (?, ?, ?)",
                [(role.name, user, i) for role in roles for i, user in enumerate(role.users)]
            )
            conn.commit()
        logger.debug(f"Saved {len(roles)} roles to {self.db_path}")
