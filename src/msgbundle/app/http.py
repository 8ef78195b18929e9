"""Problem payloads for failed catalogue lookups and unknown routes."""

from __future__ import annotations

from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Any

from flask import jsonify

from msgbundle.localization import (
    CatalogNotFoundError,
    CatalogReadError,
    LocalizationError,
    MessageKeyNotFoundError,
)


@dataclass(frozen=True)
class ProblemResponse:
    """JSON error body: an ``error`` code, a message and lookup details."""

    error: str
    status: HTTPStatus
    message: str
    details: dict[str, str] = field(default_factory=dict)

    def to_response(self) -> tuple[Any, int]:
        return jsonify({"error": self.error, "message": self.message, **self.details}), int(
            self.status
        )


def lookup_problem(error: LocalizationError) -> ProblemResponse:
    """Map a catalogue failure onto its problem payload.

    Missing catalogues and keys are client-addressable (404); a catalogue
    that exists but cannot be decoded is a server fault (500).
    """

    if isinstance(error, CatalogNotFoundError):
        return ProblemResponse(
            "catalog_not_found",
            HTTPStatus.NOT_FOUND,
            str(error),
            {"base_name": error.base_name, "locale": str(error.locale)},
        )
    if isinstance(error, MessageKeyNotFoundError):
        return ProblemResponse(
            "message_key_not_found",
            HTTPStatus.NOT_FOUND,
            str(error),
            {"key": error.key, "catalog": error.catalog_name},
        )
    if isinstance(error, CatalogReadError):
        return ProblemResponse(
            "catalog_unreadable",
            HTTPStatus.INTERNAL_SERVER_ERROR,
            str(error),
            {"catalog": error.catalog_name},
        )
    return ProblemResponse("lookup_failed", HTTPStatus.INTERNAL_SERVER_ERROR, str(error))


def route_not_found(description: str | None) -> ProblemResponse:
    return ProblemResponse("not_found", HTTPStatus.NOT_FOUND, description or "Not found")


__all__ = ["ProblemResponse", "lookup_problem", "route_not_found"]
