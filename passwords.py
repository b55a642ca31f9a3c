# passwords.py
# ------------------------------------------------------------
# Password storage policy for the secure registration path.
#
# bcrypt with a fixed cost of 10 rounds. The stored form
# ("$2b$10$<salt><digest>") carries its own salt and cost, so
# verification needs nothing but the stored string.
# ------------------------------------------------------------
import bcrypt

from errors import PolicyError

ROUNDS = 10
MAX_BYTES = 72  # bcrypt ignores (or rejects) anything past 72 bytes


def hash_password(plaintext: str) -> str:
    """
    Produce the stored form of a password.

    Raises PolicyError for non-strings, empty passwords and passwords
    longer than bcrypt's 72-byte input limit. Each call draws a fresh
    salt, so two hashes of the same password differ but both verify.
    """
    if not isinstance(plaintext, str):
        raise PolicyError("password must be a string")
    if not plaintext:
        raise PolicyError("password must not be empty")
    raw = plaintext.encode("utf-8")
    if len(raw) > MAX_BYTES:
        raise PolicyError("password must be at most %d bytes" % MAX_BYTES)
    return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=ROUNDS)).decode("ascii")


def verify_password(plaintext: str, stored: str) -> bool:
    """True when plaintext matches the stored form. Never raises."""
    if not isinstance(plaintext, str) or not isinstance(stored, str):
        return False
    try:
        return bcrypt.checkpw(plaintext.encode("utf-8"), stored.encode("utf-8"))
    except ValueError:
        # Not a bcrypt string ("invalid salt"), or a plaintext row.
        return False
