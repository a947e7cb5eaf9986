"""Pydantic models for locales, name tables and CLDR JSON structures."""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field

_LANGUAGE_RE = re.compile(r"[A-Za-z]{2,8}")
_SUBTAG_RE = re.compile(r"[A-Za-z0-9]+")


class LocaleParseError(ValueError):
    """Raised when a locale tag cannot be parsed."""


class Category(str, Enum):
    """Kind of identifier an entry carries."""

    LANGUAGE = "language"
    REGION = "region"
    SCRIPT = "script"
    CURRENCY = "currency"


class Locale(BaseModel, frozen=True):
    """BCP-47 style locale; the empty language denotes the root locale."""

    language: str
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()

    @classmethod
    def parse(cls, tag: str) -> Locale:
        """Parse a BCP-47 (or underscore separated) tag into a Locale.

        Raises:
            LocaleParseError: If the tag is malformed.
        """
        if tag in ("", "root"):
            return ROOT
        subtags = tag.replace("_", "-").split("-")
        if not _LANGUAGE_RE.fullmatch(subtags[0]):
            raise LocaleParseError(f"Invalid language subtag in locale tag {tag!r}")
        language = subtags[0].lower()
        script: str | None = None
        region: str | None = None
        variants_list: list[str] = []
        for subtag in subtags[1:]:
            if not _SUBTAG_RE.fullmatch(subtag):
                raise LocaleParseError(f"Invalid subtag {subtag!r} in locale tag {tag!r}")
            if len(subtag) == 4 and subtag.isalpha():
                script = subtag.title()
            elif (len(subtag) == 2 and subtag.isalpha()) or (
                len(subtag) == 3 and subtag.isdigit()
            ):
                region = subtag.upper()
            else:
                variants_list.append(subtag.lower())
        return cls(
            language=language,
            script=script,
            region=region,
            variants=tuple(variants_list),
        )

    @property
    def is_root(self) -> bool:
        return not (self.language or self.script or self.region or self.variants)

    def __str__(self) -> str:
        if self.is_root:
            return "root"
        parts: list[str] = [self.language]
        if self.script:
            parts.append(self.script)
        if self.region:
            parts.append(self.region)
        parts.extend(self.variants)
        return "-".join(parts)

    def __hash__(self) -> int:
        return hash((self.language, self.script, self.region, self.variants))


ROOT = Locale(language="")

# Tags whose subtags do not follow the usual shape rules.
SPECIAL_LOCALE_TAGS: dict[str, Locale] = {
    "no-NO-NY": Locale(language="no", region="NO", variants=("ny",)),
}


def locale_from_tag(tag: str) -> Locale:
    """Build the Locale for a resource file tag, honouring special tags."""
    special = SPECIAL_LOCALE_TAGS.get(tag)
    if special is not None:
        return special
    return Locale.parse(tag)


class NameTable(BaseModel):
    """Explicit display names a single locale provides."""

    languages: dict[str, str] = Field(default_factory=dict)
    territories: dict[str, str] = Field(default_factory=dict)
    scripts: dict[str, str] = Field(default_factory=dict)
    currencies: dict[str, str] = Field(default_factory=dict)

    def names_for(self, category: Category) -> dict[str, str]:
        if category is Category.LANGUAGE:
            return self.languages
        if category is Category.REGION:
            return self.territories
        if category is Category.SCRIPT:
            return self.scripts
        return self.currencies


class LocaleDisplayNames(BaseModel):
    """Locale display names block."""

    languages: dict[str, str]


class LocaleEntry(BaseModel):
    """Entry for a single locale in languages.json."""

    locale_display_names: LocaleDisplayNames = Field(alias="localeDisplayNames")


class LanguagesJsonMain(BaseModel):
    """Main block in languages.json."""

    main: dict[str, LocaleEntry]


class ScriptDisplayNames(BaseModel):
    """Script display names block."""

    scripts: dict[str, str]


class ScriptsLocaleEntry(BaseModel):
    """Entry for a single locale in scripts.json."""

    locale_display_names: ScriptDisplayNames = Field(alias="localeDisplayNames")


class ScriptsJsonMain(BaseModel):
    """Main block in scripts.json."""

    main: dict[str, ScriptsLocaleEntry]


class TerritoryDisplayNames(BaseModel):
    """Territory display names block."""

    territories: dict[str, str]


class TerritoriesLocaleEntry(BaseModel):
    """Entry for a single locale in territories.json."""

    locale_display_names: TerritoryDisplayNames = Field(alias="localeDisplayNames")


class TerritoriesJsonMain(BaseModel):
    """Main block in territories.json."""

    main: dict[str, TerritoriesLocaleEntry]


class CurrencyInfo(BaseModel):
    """A single currency in currencies.json."""

    display_name: str | None = Field(default=None, alias="displayName")


class CurrencyNumbers(BaseModel):
    """Numbers block of currencies.json."""

    currencies: dict[str, CurrencyInfo]


class CurrenciesLocaleEntry(BaseModel):
    """Entry for a single locale in currencies.json."""

    numbers: CurrencyNumbers


class CurrenciesJsonMain(BaseModel):
    """Main block in currencies.json."""

    main: dict[str, CurrenciesLocaleEntry]
