# errors.py
# ------------------------------------------------------------
# Errors surfaced to API clients. Each carries the HTTP status the
# application error handler answers with; the message becomes the
# "error" field of the JSON body.
# ------------------------------------------------------------


class DemoError(Exception):
    status = 400

    def __init__(self, message=None):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class Unauthorized(DemoError):
    """Access gate rejected the request."""
    status = 401

    def __init__(self, message="Unauthorized"):
        super().__init__(message)


class DuplicateKey(DemoError):
    """UNIQUE constraint violated (username already registered)."""


class PolicyError(DemoError):
    """Password refused by the hashing policy."""


class MalformedInput(DemoError):
    """Request data the store or sanitizer cannot accept."""
