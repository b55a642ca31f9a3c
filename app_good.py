# app_good.py
# ============================================================
# SECURE ENDPOINTS - EDUCATIONAL DEMONSTRATION
# ============================================================
# Mitigated counterparts of the endpoints in app_bad.py, one per
# OWASP Top-10 (2021) category:
#
#   A01 Broken Access Control  -> bearer-token gate, minimal fields
#   A02 Cryptographic Failures -> bcrypt password hashing
#   A03 Injection              -> parameterized queries
#   A04 Insecure Design        -> allow-list HTML sanitization
#
# The gate below is intentionally simple: one static shared token,
# no per-user identity, no expiry, no signature. It shows where a
# gate sits, not how a real authentication protocol works.
# ============================================================
import functools
import logging

from flask import Blueprint, jsonify, request

from config import Config
from errors import DuplicateKey, MalformedInput, Unauthorized
from passwords import hash_password
from responses import err, ok, request_data
from sanitizer import sanitize

logger = logging.getLogger(__name__)

DEFAULT_BEARER = Config().bearer

TOPICS = [
    "A01 Access control (bearer token, no password field) -> GET /user/<id>/secure",
    "A02 Password hashing (bcrypt, 10 rounds) -> POST /register/secure",
    "A03 Parameterized query -> GET /posts/secure?userId=1",
    "A04 Sanitized content -> POST /post/secure",
]

# ============================================================
# ACCESS GATE
# ============================================================


def authorize(headers, expected=DEFAULT_BEARER) -> bool:
    """
    Decide whether a request may reach a protected handler.

    The Authorization header must equal `expected` exactly
    ("Bearer valid_token" by default). A missing header, another
    scheme, extra whitespace or different casing are all rejected.
    Pure function of the headers: no state, no side effects.
    """
    return headers.get("Authorization") == expected


def require_token(expected=DEFAULT_BEARER):
    """
    Decorator applying `authorize` before the view runs.

    On rejection Unauthorized is raised, which the application
    renders as 401 {"error": "Unauthorized"}. The view never runs.
    """
    def decorator(view):
        @functools.wraps(view)
        def wrapper(*args, **kwargs):
            if not authorize(request.headers, expected):
                logger.warning("gate rejected %s %s", request.method, request.path)
                raise Unauthorized()
            return view(*args, **kwargs)
        return wrapper
    return decorator


def create_blueprint(store, config=None):
    config = config or Config()
    bp = Blueprint("secure", __name__)
    gate = require_token(config.bearer)

    # ============================================================
    # A01: AUTHORIZATION AND MINIMAL EXPOSURE
    # ============================================================

    @bp.get("/user/<user_id>/secure")
    @gate
    def get_user_secure(user_id):
        """
        Returns a user behind the access gate.

        SECURITY FEATURES:
        - Requires the bearer token (401 otherwise)
        - Selects id and username only; the stored password never leaves
          the database
        """
        user = store.get_public_user_by_id(user_id)
        return jsonify(user or {})

    # ============================================================
    # A02: PASSWORD STORAGE
    # ============================================================

    @bp.post("/register/secure")
    def register_secure():
        """
        Registers a user with a bcrypt-hashed password.

        SECURITY FEATURES:
        - Salted, adaptive hash (bcrypt, cost 10); salt and cost live in
          the stored string
        - Empty and over-long passwords refused before hashing
        - The password itself is never logged
        """
        data = request_data()
        username, password = data.get("username"), data.get("password")
        if not isinstance(username, str) or not username:
            raise MalformedInput("username must be a non-empty string")
        try:
            store.insert_user(username, hash_password(password))
        except DuplicateKey as e:
            logger.warning("duplicate username %r", username)
            return err(e.message, 400)
        logger.info("registered %r (bcrypt)", username)
        return ok()

    # ============================================================
    # A03: SQL INJECTION PREVENTION
    # ============================================================

    @bp.get("/posts/secure")
    def posts_secure():
        """
        Lists posts of one owner with a parameterized query.

        The driver binds userId as a value, so "1 OR 1=1" is compared
        against user_id as a literal and matches nothing.
        """
        return jsonify(store.get_posts_by_owner(request.args.get("userId")))

    # ============================================================
    # A04: STORED XSS PREVENTION
    # ============================================================

    @bp.post("/post/secure")
    def post_secure():
        """
        Creates a post after allow-list sanitization.

        Unknown tags, event-handler attributes and javascript: links are
        removed before the content reaches the database.
        """
        data = request_data()
        store.insert_post(data.get("userId"), sanitize(data.get("content")))
        return ok()

    return bp
