"""Inheritance-aware value resolution."""

from __future__ import annotations

from collections.abc import Callable, Collection

from .chain import nearest_supported_ancestor
from .models import ROOT, Locale

Getter = Callable[[str, Locale], str]
LocalePredicate = Callable[[Locale], bool]


def resolve(
    identifier: str,
    locale: Locale,
    getter: Getter,
    supported: Collection[Locale],
    always_write: LocalePredicate | None = None,
) -> str | None:
    """Resolve the value to store for ``identifier`` in ``locale``.

    Returns ``None`` when the value equals the one the supported parent
    locale already provides, meaning the entry can be inherited instead of
    written. Root values and locales matched by ``always_write`` are always
    returned.
    """
    if locale.is_root:
        return getter(identifier, ROOT)

    parent = nearest_supported_ancestor(locale, supported)
    value = getter(identifier, locale)
    if always_write is not None and always_write(locale):
        return value
    if parent not in supported:
        return value
    if value == getter(identifier, parent):
        return None
    return value
