import time
import uuid
import json
import logging
from datetime import datetime, timezone
from typing import Optional

from flask import Flask, request, g, jsonify
from flask_cors import CORS
from flasgger import Swagger
from werkzeug.exceptions import HTTPException
import sentry_sdk
from sentry_sdk.integrations.flask import FlaskIntegration

from lawsuits.api import config, dependencies, metrics
from lawsuits.api.extensions import limiter
from lawsuits.api.routes import lawsuits_bp, monitoring_bp
from lawsuits.errors import ApiError
from lawsuits.repository import LawsuitRepository
from lawsuits.service import LawsuitService

# Logging
logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO), format='%(message)s')
logger = logging.getLogger("api")

SWAGGER_TEMPLATE = {
    "info": {
        "title": "Lawsuits API",
        "description": "Read-only consultation of legal lawsuits",
        "version": config.APP_VERSION,
    },
    "tags": [{"name": "lawsuits"}],
}


def _init_sentry() -> None:
    if not config.SENTRY_DSN:
        return
    sentry_sdk.init(
        dsn=config.SENTRY_DSN,
        integrations=[FlaskIntegration()],
        traces_sample_rate=config.SENTRY_TRACES_SAMPLE_RATE,
        environment=config.APP_ENV,
        release=config.APP_VERSION,
    )
    logger.info("Sentry initialized")


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def _api_error(e: ApiError):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        code = (e.name or "HTTP_ERROR").upper().replace(" ", "_")
        return jsonify({"code": code, "message": e.description or e.name}), e.code or 500

    @app.errorhandler(Exception)
    def _unhandled(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"code": "INTERNAL_SERVER_ERROR", "message": "Internal server error"}), 500


def _register_request_hooks(app: Flask) -> None:
    @app.before_request
    def _before_request():
        g.request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        g.started_at = time.time()
        g.endpoint_for_metrics = request.endpoint or "unmatched"

    @app.after_request
    def _after_request(response):
        duration = time.time() - getattr(g, 'started_at', time.time())
        log_obj = {
            "ts": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "lvl": "info",
            "request_id": getattr(g, 'request_id', None),
            "method": request.method,
            "path": request.path,
            "query": request.query_string.decode("utf-8", "replace") or None,
            "status": response.status_code,
            "duration_ms": int(duration * 1000),
            "remote_addr": request.headers.get('X-Forwarded-For', request.remote_addr),
            "ua": request.headers.get('User-Agent'),
        }
        logger.info(json.dumps(log_obj, ensure_ascii=False))

        ep = getattr(g, 'endpoint_for_metrics', "unmatched")
        metrics.REQUEST_COUNT.labels(request.method, ep, response.status_code).inc()
        metrics.REQUEST_LATENCY.labels(ep).observe(duration)

        if getattr(g, 'request_id', None):
            response.headers["X-Request-ID"] = g.request_id
        return response


def create_app(repository: Optional[LawsuitRepository] = None, testing: bool = False) -> Flask:
    """Build the Flask application.

    The dataset is loaded before the app is returned; a missing or invalid
    data file raises here, so a process that fails to load never serves.
    Tests pass an in-memory ``repository`` instead.
    """
    _init_sentry()

    if repository is None:
        repository = dependencies.load_repository()

    app = Flask(__name__)
    app.config['TESTING'] = testing
    app.json.sort_keys = False
    app.config['RATELIMIT_ENABLED'] = config.RATE_LIMIT_ENABLED and not testing
    app.extensions[dependencies.EXTENSION_KEY] = LawsuitService(repository)

    CORS(app)
    Swagger(app, template=SWAGGER_TEMPLATE)
    limiter.init_app(app)

    app.register_blueprint(lawsuits_bp)
    app.register_blueprint(monitoring_bp)

    _register_error_handlers(app)
    _register_request_hooks(app)
    return app
