"""CLDR data loaders with Pydantic validation."""

from __future__ import annotations

from pathlib import Path

from .io import load_json
from .models import (
    ROOT,
    CurrenciesJsonMain,
    LanguagesJsonMain,
    Locale,
    NameTable,
    ScriptsJsonMain,
    TerritoriesJsonMain,
)

LOCALENAMES_PACKAGE = "cldr-localenames-full"
NUMBERS_PACKAGE = "cldr-numbers-full"


def localenames_root(cldr_root: Path) -> Path:
    return cldr_root / LOCALENAMES_PACKAGE / "main"


def numbers_root(cldr_root: Path) -> Path:
    return cldr_root / NUMBERS_PACKAGE / "main"


def locale_directories(main_root: Path, filename: str) -> dict[Locale, Path]:
    """Map each locale directory holding ``filename`` to its parsed Locale."""
    directories: dict[Locale, Path] = {}
    if not main_root.is_dir():
        return directories
    for entry in sorted(main_root.iterdir()):
        if entry.is_dir() and (entry / filename).is_file():
            directories[Locale.parse(entry.name)] = entry
    return directories


def load_supported_locales(main_root: Path, filename: str) -> frozenset[Locale]:
    """Locales with explicit data in ``filename``, plus root."""
    return frozenset(locale_directories(main_root, filename)) | {ROOT}


def load_language_names(locale_dir: Path) -> dict[str, str] | None:
    """Load and parse a locale's languages.json."""
    path = locale_dir / "languages.json"
    if not path.is_file():
        return None
    data = LanguagesJsonMain.model_validate(load_json(path))
    return data.main[locale_dir.name].locale_display_names.languages


def load_script_names(locale_dir: Path) -> dict[str, str] | None:
    """Load and parse a locale's scripts.json."""
    path = locale_dir / "scripts.json"
    if not path.is_file():
        return None
    data = ScriptsJsonMain.model_validate(load_json(path))
    return data.main[locale_dir.name].locale_display_names.scripts


def load_territory_names(locale_dir: Path) -> dict[str, str] | None:
    """Load and parse a locale's territories.json."""
    path = locale_dir / "territories.json"
    if not path.is_file():
        return None
    data = TerritoriesJsonMain.model_validate(load_json(path))
    return data.main[locale_dir.name].locale_display_names.territories


def load_currency_names(locale_dir: Path) -> dict[str, str] | None:
    """Load and parse a locale's currencies.json display names."""
    path = locale_dir / "currencies.json"
    if not path.is_file():
        return None
    data = CurrenciesJsonMain.model_validate(load_json(path))
    currencies = data.main[locale_dir.name].numbers.currencies
    return {
        code: info.display_name
        for code, info in currencies.items()
        if info.display_name is not None
    }


def load_name_table(
    localenames_dir: Path | None, numbers_dir: Path | None
) -> NameTable | None:
    """Assemble a NameTable from a locale's CLDR directories."""
    if localenames_dir is None and numbers_dir is None:
        return None
    table = NameTable()
    if localenames_dir is not None:
        table.languages = load_language_names(localenames_dir) or {}
        table.scripts = load_script_names(localenames_dir) or {}
        table.territories = load_territory_names(localenames_dir) or {}
    if numbers_dir is not None:
        table.currencies = load_currency_names(numbers_dir) or {}
    return table
