"""Locale values and the positional argument forms that select them."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Union

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"
DEFAULT_COUNTRY = "US"


@dataclass(frozen=True)
class Locale:
    """A ``(language, country)`` pair identifying a catalogue variant.

    Language codes are stored lowercase and country codes uppercase, so
    ``Locale("EN", "us")`` addresses the ``_en_US`` catalogue.
    """

    language: str
    country: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "language", self.language.strip().lower())
        object.__setattr__(self, "country", self.country.strip().upper())

    def candidate_suffixes(self) -> tuple[str, ...]:
        """Return catalogue name suffixes, most specific first.

        The empty suffix addresses the base catalogue itself.
        """

        suffixes: list[str] = []
        if self.language and self.country:
            suffixes.append(f"_{self.language}_{self.country}")
        if self.language:
            suffixes.append(f"_{self.language}")
        suffixes.append("")
        return tuple(suffixes)

    def __str__(self) -> str:
        if self.country:
            return f"{self.language}_{self.country}"
        return self.language


DEFAULT_LOCALE = Locale(DEFAULT_LANGUAGE, DEFAULT_COUNTRY)


@dataclass(frozen=True)
class NoOverride:
    """No positional arguments were supplied."""


@dataclass(frozen=True)
class Override:
    """Exactly two positional arguments: language then country."""

    language: str
    country: str


@dataclass(frozen=True)
class Malformed:
    """Any other argument count; the arguments are ignored."""

    arguments: tuple[str, ...]


LocaleArguments = Union[NoOverride, Override, Malformed]


def parse_locale_arguments(argv: Sequence[str]) -> LocaleArguments:
    """Classify positional arguments by count."""

    if not argv:
        return NoOverride()
    if len(argv) == 2:
        return Override(language=argv[0], country=argv[1])
    return Malformed(arguments=tuple(argv))


def resolve_locale(arguments: LocaleArguments) -> Locale:
    """Return the locale selected by ``arguments``.

    Only an :class:`Override` changes the locale; every other form yields
    :data:`DEFAULT_LOCALE`.
    """

    if isinstance(arguments, Override):
        return Locale(arguments.language, arguments.country)
    if isinstance(arguments, Malformed):
        logger.warning(
            "Ignoring %d locale argument(s), expected 0 or 2; using %s",
            len(arguments.arguments),
            DEFAULT_LOCALE,
        )
    return DEFAULT_LOCALE


__all__ = [
    "DEFAULT_LOCALE",
    "Locale",
    "LocaleArguments",
    "Malformed",
    "NoOverride",
    "Override",
    "parse_locale_arguments",
    "resolve_locale",
]
