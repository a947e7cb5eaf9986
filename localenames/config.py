"""Generator configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from .io import load_json
from .models import Locale

DEFAULT_ALWAYS_WRITE_LANGUAGES = frozenset({"no", "nb", "nn"})


class ExclusionRule(BaseModel, frozen=True):
    """Locales whose entries are always written, never inherited.

    Norwegian locales are listed by default; their regional variants do not
    follow the regular parent chain.
    """

    languages: frozenset[str] = DEFAULT_ALWAYS_WRITE_LANGUAGES

    def __call__(self, locale: Locale) -> bool:
        return locale.language in self.languages


class GeneratorConfig(BaseModel, frozen=True):
    """Settings for a regeneration run."""

    output_subdir: str = "resources"
    extension: str = "properties"
    copyright_holder: str = "Oracle and/or its affiliates"
    root_data_locale: str = "en"
    always_write: ExclusionRule = Field(default_factory=ExclusionRule)
    cache_dir: Path = Path(".cldr")


def load_config(path: Path | None) -> GeneratorConfig:
    """Load a GeneratorConfig from a JSON file, or the defaults."""
    if path is None:
        return GeneratorConfig()
    return GeneratorConfig.model_validate(load_json(path))
