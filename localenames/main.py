"""CLI entrypoint for regenerating locale and currency name resources from CLDR data."""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path
from typing import Annotated

import typer

from .config import ExclusionRule, load_config
from .io import DownloadError, ExtractionError, download_file, extract_archive
from .processing import (
    ConversionError,
    ResourceConverter,
    ResourceKind,
    find_resource_files,
)
from .provider import DisplayNameProvider

CLDR_RELEASE = "48.0.0"
CLDR_ARCHIVE_NAME = f"cldr-{CLDR_RELEASE}-json-full.zip"
CLDR_URL = (
    "https://github.com/unicode-org/cldr-json/releases/download/"
    f"{CLDR_RELEASE}/{CLDR_ARCHIVE_NAME}"
)

app = typer.Typer(
    help="Regenerate LocaleNames and CurrencyNames resource files from CLDR data.",
    add_completion=False,
)


def prepare_cldr(cldr_zip: Path | None, cache_dir: Path, tmp_path: Path) -> Path:
    """Locate or download the CLDR archive and extract it under ``tmp_path``."""
    if cldr_zip:
        archive_path = cldr_zip
        typer.echo(f"Using existing CLDR archive: {archive_path}")
    else:
        archive_path = cache_dir / CLDR_ARCHIVE_NAME
        if archive_path.is_file():
            typer.echo(f"Using cached CLDR archive: {archive_path}")
        else:
            typer.echo(f"Downloading {CLDR_URL}...")
            download_file(CLDR_URL, archive_path)

    typer.echo(f"Extracting {archive_path.name}...")
    extract_dir = tmp_path / "cldr"
    extract_archive(archive_path, extract_dir)
    return extract_dir


@app.command()
def main(
    input_dir: Annotated[
        Path,
        typer.Argument(
            help="Directory containing LocaleNames and CurrencyNames files.",
            exists=True,
            file_okay=False,
            dir_okay=True,
            readable=True,
            resolve_path=True,
        ),
    ],
    output_root: Annotated[
        Path,
        typer.Argument(
            help="Root directory; files are written to its resources subdirectory.",
            file_okay=False,
            dir_okay=True,
            writable=True,
            resolve_path=True,
        ),
    ],
    cldr_zip: Annotated[
        Path | None,
        typer.Option(
            "--cldr-zip",
            help="Path to an existing CLDR archive. If missing, the archive is downloaded into the cache directory.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    cldr_dir: Annotated[
        Path | None,
        typer.Option(
            "--cldr-dir",
            help="Path to an already extracted CLDR archive.",
            exists=True,
            file_okay=False,
            dir_okay=True,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="JSON file with generator settings.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    exclude_language: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude-language",
            help="Language whose entries are always written. Repeat to list several; replaces the configured list.",
        ),
    ] = None,
    extension: Annotated[
        str | None,
        typer.Option("--extension", help="Resource file extension."),
    ] = None,
    year: Annotated[
        int | None,
        typer.Option("--year", help="Copyright year to stamp. Defaults to the current year."),
    ] = None,
) -> None:
    """Regenerate resource files, omitting entries inherited from parent locales."""
    try:
        config = load_config(config_path)
    except ValueError as e:
        typer.secho(f"Error: invalid configuration: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    overrides: dict[str, object] = {}
    if exclude_language:
        overrides["always_write"] = ExclusionRule(languages=frozenset(exclude_language))
    if extension:
        overrides["extension"] = extension
    if overrides:
        config = config.model_copy(update=overrides)

    output_dir = output_root / config.output_subdir
    written = 0
    changed = 0
    with tempfile.TemporaryDirectory() as tmp_dir:
        if cldr_dir:
            cldr_root = cldr_dir
            typer.echo(f"Using extracted CLDR data: {cldr_root}")
        else:
            try:
                cldr_root = prepare_cldr(cldr_zip, config.cache_dir, Path(tmp_dir))
            except (DownloadError, ExtractionError) as e:
                typer.secho(str(e), fg=typer.colors.RED, err=True)
                raise typer.Exit(code=1)

        try:
            provider = DisplayNameProvider.from_cldr(cldr_root, config.root_data_locale)
        except ValueError as e:
            typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

        converter = ResourceConverter(provider, config, year or date.today().year)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            for kind in ResourceKind:
                for path in find_resource_files(input_dir, kind, config.extension):
                    locale = converter.locale_for(path, kind)
                    typer.echo(f"file: {path}, loc: {locale}")
                    if converter.convert(path, kind, output_dir, locale):
                        changed += 1
                    written += 1
        except (ConversionError, OSError, ValueError) as e:
            typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=1)

    typer.secho(
        f"\nSuccessfully wrote {written} files ({changed} changed) to {output_dir}",
        fg=typer.colors.GREEN,
        bold=True,
    )


if __name__ == "__main__":
    app()
