"""Resource file regeneration."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Sequence
from enum import Enum
from functools import partial
from pathlib import Path

from .chain import ChainLookupError
from .classifier import (
    CURRENCY_NAME_CATEGORIES,
    LOCALE_NAME_CATEGORIES,
    Classification,
    classify,
)
from .config import GeneratorConfig
from .io import read_lines, write_lines
from .models import Category, Locale, LocaleParseError, locale_from_tag
from .provider import DisplayNameProvider
from .resolver import Getter, resolve

Classifier = Callable[[str], Classification | None]
EntryResolver = Callable[[Category, str, Locale], str | None]

_ESCAPE_RE = re.compile(r"\\u([0-9a-fA-F]{4})")


class ConversionError(Exception):
    """Raised when a resource file cannot be regenerated."""

    def __init__(self, path: Path, locale: Locale | None, reason: str) -> None:
        self.path = path
        self.locale = locale
        location = f"{path}" if locale is None else f"{path} (locale {locale})"
        super().__init__(f"Failed to convert {location}: {reason}")


class ResourceKind(str, Enum):
    """Families of resource files, named by their file prefix."""

    LOCALE_NAMES = "LocaleNames"
    CURRENCY_NAMES = "CurrencyNames"

    @property
    def categories(self) -> tuple[Category, ...]:
        if self is ResourceKind.CURRENCY_NAMES:
            return CURRENCY_NAME_CATEGORIES
        return LOCALE_NAME_CATEGORIES


def encode(text: str) -> str:
    """Escape every non-ASCII character as ``\\uXXXX``.

    Characters outside the BMP become a UTF-16 surrogate pair.
    """
    escaped: list[str] = []
    for char in text:
        code_point = ord(char)
        if code_point < 0x80:
            escaped.append(char)
        elif code_point > 0xFFFF:
            code_point -= 0x10000
            escaped.append(f"\\u{0xD800 + (code_point >> 10):04x}")
            escaped.append(f"\\u{0xDC00 + (code_point & 0x3FF):04x}")
        else:
            escaped.append(f"\\u{code_point:04x}")
    return "".join(escaped)


def decode_escapes(text: str) -> str:
    """Reverse ``encode``."""
    decoded = _ESCAPE_RE.sub(lambda m: chr(int(m.group(1), 16)), text)
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16")


def stamp_copyright(lines: Iterable[str], year: int, holder: str) -> list[str]:
    """Set the year preceding ``, <holder>`` in each line to ``year``."""
    pattern = re.compile(rf"\d{{4}}(?=, {re.escape(holder)})")
    return [pattern.sub(str(year), line, count=1) for line in lines]


def transform_lines(
    lines: Iterable[str],
    locale: Locale,
    classify_line: Classifier,
    resolve_entry: EntryResolver,
) -> list[str]:
    """Regenerate classified entries, dropping the ones that are inherited."""
    output: list[str] = []
    for line in lines:
        classification = classify_line(line)
        if classification is not None:
            category, identifier = classification
            value = resolve_entry(category, identifier, locale)
            if value is None:
                continue
            line = f"{identifier}={value}"
        output.append(encode(line))
    return output


def regenerate(
    lines: Sequence[str],
    locale: Locale,
    classify_line: Classifier,
    resolve_entry: EntryResolver,
    *,
    year: int,
    copyright_holder: str,
) -> list[str]:
    """Transform ``lines`` and refresh the copyright year if anything changed."""
    output = transform_lines(lines, locale, classify_line, resolve_entry)
    if output != list(lines):
        output = stamp_copyright(output, year, copyright_holder)
    return output


def resource_pattern(kind: ResourceKind, extension: str) -> re.Pattern[str]:
    return re.compile(rf"{kind.value}(?:_(?P<tag>[^.]+))?\.{re.escape(extension)}")


def find_resource_files(
    input_dir: Path, kind: ResourceKind, extension: str
) -> list[Path]:
    """List the files of ``kind`` directly inside ``input_dir``."""
    pattern = resource_pattern(kind, extension)
    return sorted(
        path
        for path in input_dir.iterdir()
        if path.is_file() and pattern.fullmatch(path.name)
    )


def locale_from_filename(name: str, kind: ResourceKind, extension: str) -> Locale:
    """Locale encoded in a resource file name; no tag means root."""
    match = resource_pattern(kind, extension).fullmatch(name)
    if match is None:
        raise LocaleParseError(f"{name!r} is not a {kind.value} file")
    tag = match.group("tag") or ""
    return locale_from_tag(tag.replace("_", "-"))


class ResourceConverter:
    """Regenerates resource files against a display-name provider."""

    def __init__(
        self, provider: DisplayNameProvider, config: GeneratorConfig, year: int
    ) -> None:
        self.provider = provider
        self.config = config
        self.year = year

    def getter(self, category: Category) -> Getter:
        if category is Category.CURRENCY:
            return lambda identifier, locale: self.provider.currency_display_name(
                identifier.upper(), locale
            )
        return lambda identifier, locale: self.provider.locale_display_name(
            identifier, category, locale
        )

    def supported(self, kind: ResourceKind) -> frozenset[Locale]:
        if kind is ResourceKind.CURRENCY_NAMES:
            return self.provider.supported_currency_names
        return self.provider.supported_locale_names

    def resolve_entry(
        self, kind: ResourceKind, category: Category, identifier: str, locale: Locale
    ) -> str | None:
        return resolve(
            identifier,
            locale,
            self.getter(category),
            self.supported(kind),
            self.config.always_write,
        )

    def convert_lines(
        self, lines: Sequence[str], kind: ResourceKind, locale: Locale
    ) -> list[str]:
        return regenerate(
            lines,
            locale,
            partial(classify, categories=kind.categories),
            partial(self.resolve_entry, kind),
            year=self.year,
            copyright_holder=self.config.copyright_holder,
        )

    def locale_for(self, path: Path, kind: ResourceKind) -> Locale:
        try:
            return locale_from_filename(path.name, kind, self.config.extension)
        except LocaleParseError as e:
            raise ConversionError(path, None, str(e)) from e

    def convert(
        self,
        path: Path,
        kind: ResourceKind,
        output_dir: Path,
        locale: Locale | None = None,
    ) -> bool:
        """Regenerate ``path`` into ``output_dir``.

        ``locale`` is parsed from the file name unless given.

        Returns:
            True if the regenerated content differs from the input.

        Raises:
            ConversionError: If the file name, locale chain or file I/O fails.
        """
        if locale is None:
            locale = self.locale_for(path, kind)
        try:
            original = read_lines(path)
            lines = self.convert_lines(original, kind, locale)
            write_lines(output_dir / path.name, lines)
        except (OSError, ChainLookupError) as e:
            raise ConversionError(path, locale, str(e)) from e
        return lines != original
