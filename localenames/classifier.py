"""Classification of resource file lines."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import NamedTuple

from .models import Category

SHAPES: dict[Category, re.Pattern[str]] = {
    Category.LANGUAGE: re.compile(r"(?P<id>[a-z]{2,3})=.*"),
    Category.REGION: re.compile(r"(?P<id>[A-Z]{2}|\d{3})=.*"),
    Category.SCRIPT: re.compile(r"(?P<id>[A-Z][a-z]{3})=.*"),
    Category.CURRENCY: re.compile(r"(?P<id>[a-z]{3})=.*"),
}

LOCALE_NAME_CATEGORIES = (Category.LANGUAGE, Category.REGION, Category.SCRIPT)
CURRENCY_NAME_CATEGORIES = (Category.CURRENCY,)


class Classification(NamedTuple):
    category: Category
    identifier: str


def classify(
    line: str, categories: Sequence[Category] = LOCALE_NAME_CATEGORIES
) -> Classification | None:
    """Return the first category whose shape matches ``line``, if any."""
    for category in categories:
        match = SHAPES[category].fullmatch(line)
        if match:
            return Classification(category, match.group("id"))
    return None
