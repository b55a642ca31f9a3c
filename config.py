# config.py
# ------------------------------------------------------------
# Runtime settings, read from environment variables.
#
#   PORT        listen port (default 3000)
#   HOST        bind address (default 127.0.0.1)
#   DATABASE    SQLite file, ":memory:" allowed (default database.sqlite)
#   AUTH_TOKEN  static bearer token for the secure endpoints
#   LOG_LEVEL   logging level name (default INFO)
#   FLASK_DEBUG "1" to enable the Flask debugger. Never in production.
# ------------------------------------------------------------
import os
from dataclasses import dataclass

DEFAULT_PORT = 3000
DEFAULT_TOKEN = "valid_token"


@dataclass(frozen=True)
class Config:
    host: str = "127.0.0.1"
    port: int = DEFAULT_PORT
    database: str = "database.sqlite"
    auth_token: str = DEFAULT_TOKEN
    log_level: str = "INFO"
    debug: bool = False

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        try:
            port = int(env.get("PORT", DEFAULT_PORT))
        except ValueError:
            raise ValueError("PORT must be an integer, got %r" % env.get("PORT"))
        return cls(
            host=env.get("HOST", "127.0.0.1"),
            port=port,
            database=env.get("DATABASE", "database.sqlite"),
            auth_token=env.get("AUTH_TOKEN", DEFAULT_TOKEN),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
            debug=env.get("FLASK_DEBUG", "0").lower() in {"1", "true", "yes"},
        )

    @property
    def bearer(self) -> str:
        """Exact Authorization header value the access gate admits."""
        return "Bearer " + self.auth_token
