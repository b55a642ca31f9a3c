# app_bad.py
# ------------------------------------------------------------
# INSECURE endpoints, one per OWASP Top-10 (2021) category.
# DO NOT DEPLOY. Educational only. The secure counterparts live
# in app_good.py.
# ------------------------------------------------------------
import logging

from flask import Blueprint, jsonify, request

from errors import DuplicateKey
from responses import err, ok, request_data

logger = logging.getLogger(__name__)

TOPICS = [
    "A01 Broken Access Control (no auth, full row) -> GET /user/<id>",
    "A02 Cryptographic Failures (plaintext password) -> POST /register/insecure",
    "A03 Injection (string-built SQL) -> GET /posts/insecure?userId=1 OR 1=1",
    "A04 Insecure Design (stored XSS) -> POST /post/insecure",
]


def create_blueprint(store):
    bp = Blueprint("insecure", __name__)

    # A01 Broken Access Control
    @bp.get("/user/<user_id>")
    def get_user(user_id):
        # BAD: no authentication, and the whole row goes out, password included
        user = store.get_user_by_id(user_id)
        return jsonify(user or {})

    # A02 Cryptographic Failures
    @bp.post("/register/insecure")
    def register_insecure():
        data = request_data()
        username, password = data.get("username"), data.get("password")
        try:
            # BAD: password stored exactly as typed
            store.insert_user(username, password)
        except DuplicateKey as e:
            logger.warning("duplicate username %r", username)
            return err(e.message, 400)
        logger.info("registered %r (plaintext)", username)
        return ok()

    # A03 Injection
    @bp.get("/posts/insecure")
    def posts_insecure():
        # BAD: userId concatenated into the SQL text
        return jsonify(store.get_posts_by_owner_unsafe(request.args.get("userId")))

    # A04 Insecure Design
    @bp.post("/post/insecure")
    def post_insecure():
        data = request_data()
        # BAD: content stored raw; rendered later it runs in the reader's browser
        store.insert_post(data.get("userId"), data.get("content"))
        return ok()

    return bp
