"""Display-name provider backed by CLDR data or in-memory tables."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from pathlib import Path

from .chain import lookup_chain
from .loaders import (
    load_name_table,
    locale_directories,
    localenames_root,
    numbers_root,
)
from .models import ROOT, Category, Locale, NameTable

TableLoader = Callable[[Locale], NameTable | None]


class DisplayNameProvider:
    """Answers display-name lookups for identifiers in a given locale.

    Lookups walk the data lookup chain of the requested locale, where script
    forms come before region forms, and return the first explicit name found.
    When no locale in the chain has a name, the identifier itself is
    returned. Tables are loaded lazily and cached.
    """

    def __init__(
        self,
        load_table: TableLoader,
        supported_locale_names: Iterable[Locale],
        supported_currency_names: Iterable[Locale],
    ) -> None:
        self._load_table = load_table
        self._cache: dict[Locale, NameTable | None] = {}
        self.supported_locale_names = frozenset(supported_locale_names)
        self.supported_currency_names = frozenset(supported_currency_names)

    @classmethod
    def from_tables(
        cls,
        tables: Mapping[Locale, NameTable],
        supported_locale_names: Iterable[Locale] | None = None,
        supported_currency_names: Iterable[Locale] | None = None,
    ) -> DisplayNameProvider:
        """Build a provider over fixed tables; every table is supported by default."""
        return cls(
            tables.get,
            tables if supported_locale_names is None else supported_locale_names,
            tables if supported_currency_names is None else supported_currency_names,
        )

    @classmethod
    def from_cldr(
        cls, cldr_root: Path, root_data_locale: str = "en"
    ) -> DisplayNameProvider:
        """Build a provider over an extracted cldr-json archive.

        Root lookups are served from ``root_data_locale``.

        Raises:
            ValueError: If the locale-name data is missing.
        """
        names_dirs = locale_directories(localenames_root(cldr_root), "languages.json")
        if not names_dirs:
            raise ValueError(f"CLDR localenames data missing from {cldr_root}.")
        currency_dirs = locale_directories(numbers_root(cldr_root), "currencies.json")
        root_data = Locale.parse(root_data_locale)
        if root_data not in names_dirs:
            raise ValueError(
                f"Root data locale '{root_data_locale}' missing from CLDR data."
            )

        def load_table(locale: Locale) -> NameTable | None:
            source = root_data if locale.is_root else locale
            return load_name_table(names_dirs.get(source), currency_dirs.get(source))

        return cls(
            load_table,
            set(names_dirs) | {ROOT},
            set(currency_dirs) | {ROOT},
        )

    def table(self, locale: Locale) -> NameTable | None:
        if locale not in self._cache:
            self._cache[locale] = self._load_table(locale)
        return self._cache[locale]

    def _lookup(self, identifier: str, category: Category, locale: Locale) -> str:
        for candidate in lookup_chain(locale):
            table = self.table(candidate)
            if table is None:
                continue
            name = table.names_for(category).get(identifier)
            if name:
                return name
        return identifier

    def locale_display_name(
        self, identifier: str, category: Category, locale: Locale
    ) -> str:
        """Display name of a language, region or script code in ``locale``."""
        if category is Category.CURRENCY:
            raise ValueError("Use currency_display_name for currency codes.")
        return self._lookup(identifier, category, locale)

    def currency_display_name(self, currency_code: str, locale: Locale) -> str:
        """Display name of an ISO 4217 currency code in ``locale``."""
        return self._lookup(currency_code, Category.CURRENCY, locale)
