"""Regenerate locale and currency name resources from CLDR data."""

from .chain import chain_of, nearest_supported_ancestor, parent_of
from .classifier import classify
from .models import ROOT, Category, Locale
from .processing import ResourceConverter, ResourceKind, transform_lines
from .provider import DisplayNameProvider
from .resolver import resolve

__all__ = [
    "ROOT",
    "Category",
    "DisplayNameProvider",
    "Locale",
    "ResourceConverter",
    "ResourceKind",
    "chain_of",
    "classify",
    "nearest_supported_ancestor",
    "parent_of",
    "resolve",
    "transform_lines",
]
