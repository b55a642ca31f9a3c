# app.py
# ------------------------------------------------------------
# OWASP Top-10 demo server: vulnerable and mitigated endpoints
# side by side. DO NOT DEPLOY. Educational only.
#
# Run:
#   pip install -e .
#   PORT=3000 python app.py
# Open: http://127.0.0.1:3000/
# ------------------------------------------------------------
import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

import app_bad
import app_good
from config import Config
from errors import DemoError
from store import Store

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Baseline response headers, the same set helmet() sends by default.
SECURITY_HEADERS = {
    "Content-Security-Policy": (
        "default-src 'self';base-uri 'self';font-src 'self' https: data:;"
        "form-action 'self';frame-ancestors 'self';img-src 'self' data:;"
        "object-src 'none';script-src 'self';script-src-attr 'none';"
        "style-src 'self' https: 'unsafe-inline';upgrade-insecure-requests"
    ),
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


def create_app(store, config=None):
    """Build the Flask app around an already opened Store."""
    config = config or Config()
    app = Flask(__name__)
    app.config["DEBUG"] = config.debug

    app.register_blueprint(app_bad.create_blueprint(store))
    app.register_blueprint(app_good.create_blueprint(store, config))

    @app.get("/")
    def index():
        return jsonify({
            "note": "Each category has a vulnerable and a mitigated endpoint",
            "insecure": app_bad.TOPICS,
            "secure": app_good.TOPICS,
        })

    @app.after_request
    def set_security_headers(response):
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    @app.errorhandler(DemoError)
    def handle_demo_error(e):
        return jsonify({"error": e.message}), e.status

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({"error": e.name}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        # Details stay in the server log; the client gets a generic message.
        logger.exception("Internal error: %s", e)
        return jsonify({"error": "internal_error"}), 500

    return app


def main():
    config = Config.from_env()
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
    with Store(config.database) as store:
        app = create_app(store, config)
        logger.info("listening on %s:%d (database %s)", config.host, config.port, config.database)
        app.run(host=config.host, port=config.port, debug=config.debug)


if __name__ == "__main__":
    main()
