"""Expose resolved message lines to HTTP consumers."""

from __future__ import annotations

from flask import Blueprint, current_app, jsonify

from msgbundle.localization import DEFAULT_LOCALE, Locale
from msgbundle.resolver import FIRST_KEY, SECOND_KEY, resolve_messages

blueprint = Blueprint("messages", __name__, url_prefix="/api/v1/messages")


def _render(locale: Locale):
    resolved = resolve_messages(
        current_app.extensions["msgbundle.store"],
        locale,
        current_app.config["MSGBUNDLE_BASE_NAME"],
    )
    payload = {
        "locale": str(resolved.locale),
        "catalog": resolved.catalog_name,
        "messages": {FIRST_KEY: resolved.first, SECOND_KEY: resolved.second},
        "line": resolved.line,
    }
    return jsonify(payload), 200


@blueprint.get("/")
def get_default_messages():
    """Return the message line for the default locale."""

    return _render(DEFAULT_LOCALE)


@blueprint.get("/<language>/<country>")
def get_locale_messages(language: str, country: str):
    """Return the message line for an explicit locale."""

    return _render(Locale(language, country))
