"""Print the greeting line for a locale chosen from positional arguments.

Usage: ``msgbundle-resolve [<language> <country>]``. Exactly two arguments
select the locale; any other count falls back to ``en_US``.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

from msgbundle.config import ConfigurationError, configure_logging, load_settings
from msgbundle.localization import (
    BASE_NAME,
    CatalogStore,
    Locale,
    LocalizationError,
    default_store,
    parse_locale_arguments,
    resolve_locale,
)

logger = logging.getLogger(__name__)

FIRST_KEY = "USED_MESSAGE_B"
SECOND_KEY = "USED_MESSAGE_D"


@dataclass(frozen=True)
class ResolvedMessages:
    locale: Locale
    catalog_name: str
    first: str
    second: str

    @property
    def line(self) -> str:
        return f"{self.first} {self.second}"


def resolve_messages(
    store: CatalogStore,
    locale: Locale,
    base_name: str = BASE_NAME,
) -> ResolvedMessages:
    """Resolve both message values, raising before anything is produced."""

    catalog = store.resolve(base_name, locale)
    return ResolvedMessages(
        locale=locale,
        catalog_name=catalog.name,
        first=catalog.get(FIRST_KEY),
        second=catalog.get(SECOND_KEY),
    )


def main(
    argv: Sequence[str] | None = None,
    *,
    store: CatalogStore | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Command-line entry point; returns the process exit status."""

    argv = sys.argv[1:] if argv is None else argv
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    try:
        settings = load_settings()
    except ConfigurationError as error:
        print(f"error: {error}", file=stderr)
        return 2
    configure_logging(settings)

    locale = resolve_locale(parse_locale_arguments(argv))
    if store is None:
        store = default_store(settings.resolver.catalog_dir)

    try:
        resolved = resolve_messages(store, locale, settings.resolver.base_name)
    except LocalizationError as error:
        logger.debug("Resolution failed for %s", locale, exc_info=True)
        print(f"error: {error}", file=stderr)
        return 1

    stdout.write(f"{resolved.line}\n")
    stdout.flush()
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    raise SystemExit(main())
