"""Message catalogues resolved by base name and locale."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Protocol

from msgbundle.messages.reader import parse_messages

from .locale import Locale

logger = logging.getLogger(__name__)

BASE_NAME = "messages"
CATALOG_SUFFIX = ".properties"
_BUNDLES_PACKAGE = "msgbundle.bundles"


class LocalizationError(LookupError):
    """Base class for catalogue resolution failures."""


class CatalogNotFoundError(LocalizationError):
    """No catalogue exists for a base name under a locale or its fallbacks."""

    def __init__(self, base_name: str, locale: Locale) -> None:
        self.base_name = base_name
        self.locale = locale
        super().__init__(f"Can't find catalog for base name {base_name}, locale {locale}")


class MessageKeyNotFoundError(LocalizationError):
    """A resolved catalogue (and its parents) lack the requested key."""

    def __init__(self, key: str, catalog_name: str) -> None:
        self.key = key
        self.catalog_name = catalog_name
        super().__init__(f"Can't find key {key} in catalog {catalog_name}")


class CatalogReadError(LocalizationError):
    """A catalogue exists but cannot be read or decoded."""

    def __init__(self, catalog_name: str, reason: object) -> None:
        self.catalog_name = catalog_name
        super().__init__(f"Can't read catalog {catalog_name}: {reason}")


@dataclass(frozen=True)
class Catalog:
    """Read-only message mapping with an optional, less specific parent."""

    name: str
    messages: Mapping[str, str]
    parent: Catalog | None = None

    def get(self, key: str) -> str:
        catalog: Catalog | None = self
        while catalog is not None:
            if key in catalog.messages:
                return catalog.messages[key]
            catalog = catalog.parent
        raise MessageKeyNotFoundError(key, self.name)


class CatalogStore(Protocol):
    """Lookup service for catalogues addressed by base name and locale."""

    def resolve(self, base_name: str, locale: Locale) -> Catalog:
        ...


class _CandidateCatalogStore:
    """Shared candidate-chain resolution over named raw catalogues.

    Subclasses implement :meth:`_load`, returning the parsed messages for a
    catalogue name or ``None`` when that name does not exist.
    """

    def _load(self, name: str) -> Mapping[str, str] | None:
        raise NotImplementedError

    def resolve(self, base_name: str, locale: Locale) -> Catalog:
        found: list[tuple[str, Mapping[str, str]]] = []
        for suffix in locale.candidate_suffixes():
            name = f"{base_name}{suffix}"
            messages = self._load(name)
            if messages is not None:
                found.append((name, messages))

        if not found:
            raise CatalogNotFoundError(base_name, locale)

        parent: Catalog | None = None
        for name, messages in reversed(found[1:]):
            parent = Catalog(name=name, messages=messages, parent=parent)

        name, messages = found[0]
        catalog = Catalog(name=name, messages=messages, parent=parent)
        logger.debug("Resolved %s for locale %s as %s", base_name, locale, catalog.name)
        return catalog


class MappingCatalogStore(_CandidateCatalogStore):
    """In-memory store keyed by full catalogue name (``messages_en_US``)."""

    def __init__(self, catalogs: Mapping[str, Mapping[str, str]]) -> None:
        self._catalogs = {
            name: MappingProxyType(dict(values)) for name, values in catalogs.items()
        }

    def _load(self, name: str) -> Mapping[str, str] | None:
        return self._catalogs.get(name)


class DirectoryCatalogStore(_CandidateCatalogStore):
    """Store reading ``<name>.properties`` files from a directory."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)
        self._cache: dict[str, Mapping[str, str] | None] = {}

    @property
    def root(self) -> Path:
        return self._root

    def _load(self, name: str) -> Mapping[str, str] | None:
        if name not in self._cache:
            path = self._root / f"{name}{CATALOG_SUFFIX}"
            if not path.is_file():
                self._cache[name] = None
            else:
                try:
                    text = path.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as error:
                    raise CatalogReadError(name, error) from error
                self._cache[name] = MappingProxyType(parse_messages(text))
        return self._cache[name]


@lru_cache
def _read_packaged_catalog(package: str, name: str) -> Mapping[str, str] | None:
    """Load a catalogue shipped as package data, caching per process."""

    try:
        resource = resources.files(package).joinpath(f"{name}{CATALOG_SUFFIX}")
    except ModuleNotFoundError:
        logger.warning("Catalog package %s is not importable", package)
        return None

    if not resource.is_file():
        return None

    try:
        with resource.open("r", encoding="utf-8") as handle:
            return MappingProxyType(parse_messages(handle.read()))
    except (OSError, UnicodeDecodeError) as error:
        raise CatalogReadError(name, error) from error


class ResourceCatalogStore(_CandidateCatalogStore):
    """Store reading catalogues bundled inside an importable package."""

    def __init__(self, package: str = _BUNDLES_PACKAGE) -> None:
        self._package = package

    def _load(self, name: str) -> Mapping[str, str] | None:
        return _read_packaged_catalog(self._package, name)


def default_store(catalog_dir: Path | None = None) -> CatalogStore:
    """Return a directory store when ``catalog_dir`` is set, else packaged bundles."""

    if catalog_dir is not None:
        return DirectoryCatalogStore(catalog_dir)
    return ResourceCatalogStore()


__all__ = [
    "BASE_NAME",
    "Catalog",
    "CatalogNotFoundError",
    "CatalogReadError",
    "CatalogStore",
    "DirectoryCatalogStore",
    "LocalizationError",
    "MappingCatalogStore",
    "MessageKeyNotFoundError",
    "ResourceCatalogStore",
    "default_store",
]
