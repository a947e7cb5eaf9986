"""Pytest configuration and shared fixtures.

Hypothesis profiles:
- dev: local development (200 examples)
- ci: CI runs (50 examples, derandomized)

The ci profile is selected when CI=true; HYPOTHESIS_PROFILE overrides it.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
from hypothesis import settings

from localenames.models import ROOT, Locale, NameTable
from localenames.provider import DisplayNameProvider

settings.register_profile("dev", max_examples=200)
settings.register_profile("ci", max_examples=50, derandomize=True, print_blob=True)


def _detect_profile() -> str:
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit:
        return explicit
    if os.environ.get("CI", "").lower() == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


EN = NameTable(
    languages={"en": "English", "fr": "French", "de": "German"},
    territories={"CA": "Canada", "FR": "France", "001": "World"},
    scripts={"Latn": "Latin", "Cyrl": "Cyrillic"},
    currencies={"EUR": "Euro", "CAD": "Canadian Dollar"},
)
FR = NameTable(
    languages={"en": "anglais", "fr": "français", "de": "allemand"},
    territories={"CA": "Canada", "FR": "France", "001": "Monde"},
    scripts={"Latn": "latin", "Cyrl": "cyrillique"},
    currencies={"EUR": "euro", "CAD": "dollar canadien"},
)
FR_CA = NameTable(
    languages={"de": "allemand standard"},
    currencies={"CAD": "dollar"},
)
NB = NameTable(languages={"nb": "norsk bokmål", "en": "engelsk"})

TABLES = {
    ROOT: EN,
    Locale.parse("en"): EN,
    Locale.parse("fr"): FR,
    Locale.parse("fr-CA"): FR_CA,
    Locale.parse("nb"): NB,
}


@pytest.fixture
def provider() -> DisplayNameProvider:
    """Provider over small in-memory tables where every table is supported."""
    return DisplayNameProvider.from_tables(TABLES)


def _write_json(path: Path, data: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")


def write_cldr_locale(cldr_root: Path, name: str, table: NameTable) -> None:
    """Write one locale of a minimal cldr-json tree."""
    names_dir = cldr_root / "cldr-localenames-full" / "main" / name
    for filename, key, names in (
        ("languages.json", "languages", table.languages),
        ("scripts.json", "scripts", table.scripts),
        ("territories.json", "territories", table.territories),
    ):
        _write_json(
            names_dir / filename,
            {"main": {name: {"localeDisplayNames": {key: names}}}},
        )
    currencies = {
        code: {"displayName": display, "symbol": code}
        for code, display in table.currencies.items()
    }
    _write_json(
        cldr_root / "cldr-numbers-full" / "main" / name / "currencies.json",
        {"main": {name: {"numbers": {"currencies": currencies}}}},
    )


@pytest.fixture
def cldr_root(tmp_path: Path) -> Path:
    """A minimal extracted cldr-json tree with en, fr, fr-CA and nb."""
    root = tmp_path / "cldr"
    for name, table in (("en", EN), ("fr", FR), ("fr-CA", FR_CA), ("nb", NB)):
        write_cldr_locale(root, name, table)
    return root
