"""Blueprint registrations for application routes."""

from flask import Flask

from .messages import blueprint as messages_blueprint


def register_routes(app: Flask) -> None:
    """Register all Flask blueprints with the provided application."""

    app.register_blueprint(messages_blueprint)
