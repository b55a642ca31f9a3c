# store.py
# ------------------------------------------------------------
# SQLite persistence for users and posts.
#
# One connection is opened per Store and shared by every request
# handler. Build it once at startup and hand it to the blueprints;
# close it on shutdown (Store is a context manager).
# ------------------------------------------------------------
import logging
import sqlite3

from errors import DuplicateKey, MalformedInput

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  username TEXT UNIQUE,
  password TEXT
);
CREATE TABLE IF NOT EXISTS posts (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  user_id INTEGER,
  content TEXT,
  FOREIGN KEY (user_id) REFERENCES users(id)
);
"""

# Values the driver refuses to bind (lists, dicts, ...).
_BIND_ERRORS = (sqlite3.InterfaceError, sqlite3.ProgrammingError)


def _dict_row(cursor, row):
    return {col[0]: value for col, value in zip(cursor.description, row)}


class Store:
    def __init__(self, path=":memory:"):
        self.path = path
        # Autocommit; SQLite serializes concurrent writers itself.
        self.conn = sqlite3.connect(path, isolation_level=None, check_same_thread=False)
        self.conn.row_factory = _dict_row
        self.conn.executescript(SCHEMA)
        logger.debug("store opened at %s", path)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.conn.close()
        logger.debug("store at %s closed", self.path)

    # ---------------- users ----------------

    def insert_user(self, username, stored_password) -> int:
        """Insert a user row as given. The caller decides what the password looks like."""
        try:
            cur = self.conn.execute(
                "INSERT INTO users (username, password) VALUES (?, ?)",
                (username, stored_password),
            )
        except sqlite3.IntegrityError as e:
            raise DuplicateKey(str(e)) from e
        except _BIND_ERRORS as e:
            raise MalformedInput(str(e)) from e
        return cur.lastrowid

    def get_user_by_id(self, user_id):
        """Full row, stored password included. None when missing."""
        return self._one("SELECT * FROM users WHERE id = ?", user_id)

    def get_public_user_by_id(self, user_id):
        return self._one("SELECT id, username FROM users WHERE id = ?", user_id)

    # ---------------- posts ----------------

    def insert_post(self, user_id, content) -> int:
        try:
            cur = self.conn.execute(
                "INSERT INTO posts (user_id, content) VALUES (?, ?)",
                (user_id, content),
            )
        except _BIND_ERRORS as e:
            raise MalformedInput(str(e)) from e
        return cur.lastrowid

    def get_posts_by_owner(self, user_id):
        try:
            return self.conn.execute(
                "SELECT * FROM posts WHERE user_id = ?", (user_id,)
            ).fetchall()
        except _BIND_ERRORS as e:
            raise MalformedInput(str(e)) from e

    def get_posts_by_owner_unsafe(self, user_id):
        """
        Same lookup, but the owner id is pasted straight into the SQL text.

        Deliberately vulnerable to SQL injection: the value is neither
        validated nor escaped, so "1 OR 1=1" returns every post and a
        UNION SELECT can read the users table. Do not reuse.
        """
        query = f"SELECT * FROM posts WHERE user_id = {user_id}"
        try:
            return self.conn.execute(query).fetchall()
        except sqlite3.Error as e:
            raise MalformedInput(str(e)) from e

    def _one(self, sql, key):
        try:
            return self.conn.execute(sql, (key,)).fetchone()
        except _BIND_ERRORS as e:
            raise MalformedInput(str(e)) from e
