import os
import platform
from flask import Blueprint, current_app, jsonify, Response

from lawsuits.api import config, dependencies

monitoring_bp = Blueprint('monitoring', __name__)


def _dataset_size():
    service = current_app.extensions.get(dependencies.EXTENSION_KEY)
    return len(service.repository) if service is not None else None


@monitoring_bp.route("/metrics", methods=["GET"])
def metrics():
    from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)


@monitoring_bp.route("/version", methods=["GET"])
def version():
    return jsonify({
        "version": config.APP_VERSION,
        "env": config.APP_ENV,
        "commit": os.getenv("GIT_COMMIT"),
        "python": platform.python_version(),
        "lawsuits": _dataset_size(),
    })


@monitoring_bp.route("/api/version", methods=["GET"])
def api_version():
    return version()


@monitoring_bp.route("/api/health/ready", methods=["GET"])
def health_ready():
    """Readiness probe - dataset loaded and service wired."""
    size = _dataset_size()
    checks = {'dataset_loaded': size is not None}
    ready = all(checks.values())
    return jsonify({"ready": ready, "checks": checks, "lawsuits": size}), 200 if ready else 503


@monitoring_bp.route("/api/health/live", methods=["GET"])
def health_live():
    """Liveness probe - minimal check that service is running."""
    return jsonify({"alive": True}), 200
