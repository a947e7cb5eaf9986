"""Locale fallback chains."""

from __future__ import annotations

from collections.abc import Collection, Sequence

from .models import ROOT, Locale


class ChainLookupError(LookupError):
    """Raised when a locale has no successor in its fallback chain."""


def _truncate(locale: Locale) -> Locale:
    """Drop the most specific subtag: variant, then script, then region."""
    if locale.variants:
        return Locale(
            language=locale.language,
            script=locale.script,
            region=locale.region,
            variants=locale.variants[:-1],
        )
    if locale.script:
        return Locale(language=locale.language, region=locale.region)
    if locale.region:
        return Locale(language=locale.language)
    return ROOT


def chain_of(locale: Locale) -> list[Locale]:
    """Generate the fallback chain for a locale, ending with root."""
    chain = [locale]
    current = locale
    while not current.is_root:
        current = _truncate(current)
        chain.append(current)
    return chain


# Scripts implied by a region for languages written in more than one script.
IMPLIED_SCRIPTS: dict[tuple[str, str], str] = {
    ("zh", "TW"): "Hant",
    ("zh", "HK"): "Hant",
    ("zh", "MO"): "Hant",
    ("zh", "CN"): "Hans",
    ("zh", "SG"): "Hans",
}


def _without_script(
    language: str, script: str | None, region: str | None, variants: tuple[str, ...]
) -> list[Locale]:
    forms = [
        Locale(language=language, script=script, region=region, variants=variants[:i])
        for i in range(len(variants), 0, -1)
    ]
    if region:
        forms.append(Locale(language=language, script=script, region=region))
    forms.append(Locale(language=language, script=script))
    return forms


def lookup_chain(locale: Locale) -> list[Locale]:
    """Chain used to find locale data: script forms come before region forms.

    ``sr-Latn-BA`` looks in ``sr-Latn-BA, sr-Latn, sr-BA, sr, root`` and
    ``zh-TW`` in ``zh-Hant-TW, zh-Hant, zh-TW, zh, root``.
    """
    if locale.is_root:
        return [ROOT]
    script = locale.script
    if script is None and locale.region:
        script = IMPLIED_SCRIPTS.get((locale.language, locale.region))
    chain: list[Locale] = []
    if script:
        chain.extend(
            _without_script(locale.language, script, locale.region, locale.variants)
        )
    chain.extend(_without_script(locale.language, None, locale.region, locale.variants))
    chain.append(ROOT)
    return chain


def parent_of(locale: Locale, chain: Sequence[Locale] | None = None) -> Locale:
    """Return the locale following ``locale`` in ``chain``.

    Args:
        locale: Locale to look up.
        chain: Fallback chain to search. Defaults to ``chain_of(locale)``.

    Raises:
        ChainLookupError: If ``locale`` is absent from the chain or is its
            last element.
    """
    if chain is None:
        chain = chain_of(locale)
    try:
        index = chain.index(locale)
    except ValueError as e:
        raise ChainLookupError(f"Locale {locale} is not part of its chain") from e
    if index + 1 >= len(chain):
        raise ChainLookupError(f"Locale {locale} has no parent")
    return chain[index + 1]


def nearest_supported_ancestor(
    locale: Locale, supported: Collection[Locale]
) -> Locale:
    """Return the ancestor of ``locale`` to compare against ``supported``.

    This is always ``parent_of(locale)``; whether ``supported`` contains it
    is left to the caller.
    """
    return parent_of(locale)
