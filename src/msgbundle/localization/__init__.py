"""Locale selection and message catalogue resolution."""

from .catalog import (
    BASE_NAME,
    Catalog,
    CatalogNotFoundError,
    CatalogReadError,
    CatalogStore,
    DirectoryCatalogStore,
    LocalizationError,
    MappingCatalogStore,
    MessageKeyNotFoundError,
    ResourceCatalogStore,
    default_store,
)
from .locale import (
    DEFAULT_LOCALE,
    Locale,
    LocaleArguments,
    Malformed,
    NoOverride,
    Override,
    parse_locale_arguments,
    resolve_locale,
)

__all__ = [
    "BASE_NAME",
    "Catalog",
    "CatalogNotFoundError",
    "CatalogReadError",
    "CatalogStore",
    "DEFAULT_LOCALE",
    "DirectoryCatalogStore",
    "Locale",
    "LocaleArguments",
    "LocalizationError",
    "Malformed",
    "MappingCatalogStore",
    "MessageKeyNotFoundError",
    "NoOverride",
    "Override",
    "ResourceCatalogStore",
    "default_store",
    "parse_locale_arguments",
    "resolve_locale",
]
