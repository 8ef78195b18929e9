"""Application factory serving resolved message catalogues over HTTP."""

from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import NotFound

from msgbundle.config import Settings, load_settings
from msgbundle.localization import CatalogStore, LocalizationError, default_store
from msgbundle.version import get_project_version

from .http import lookup_problem, route_not_found
from .routes import register_routes

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    store: CatalogStore | None = None,
) -> Flask:
    """Create and configure the Flask application instance."""

    settings = settings or load_settings()

    app = Flask(__name__)
    app.config["MSGBUNDLE_BASE_NAME"] = settings.resolver.base_name
    app.extensions["msgbundle.store"] = store or default_store(settings.resolver.catalog_dir)

    register_routes(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        return jsonify({"status": "ok", "version": get_project_version()})

    @app.errorhandler(LocalizationError)
    def handle_lookup_error(error: LocalizationError):
        problem = lookup_problem(error)
        if problem.status >= 500:
            logger.error("Catalog lookup failed: %s", error)
        else:
            logger.info("Catalog lookup failed: %s", error)
        return problem.to_response()

    @app.errorhandler(NotFound)
    def handle_not_found(error: NotFound):
        return route_not_found(error.description).to_response()

    return app


__all__ = ["create_app"]
