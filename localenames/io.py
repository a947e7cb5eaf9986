"""File I/O helpers for CLDR archives and resource files."""

from __future__ import annotations

import json
import zipfile
from collections.abc import Iterable
from pathlib import Path

import requests
from tqdm import tqdm

DEFAULT_USER_AGENT = "localenames-cldr-updater/1.0"
DEFAULT_TIMEOUT_SECONDS = 60
CLDR_PACKAGES = ("cldr-localenames-full/", "cldr-numbers-full/")


class DownloadError(Exception):
    """Raised when a file download fails."""


class ExtractionError(Exception):
    """Raised when archive extraction fails."""


def download_file(url: str, destination: Path) -> None:
    """Download the cldr-json archive into the local cache.

    A partially written archive is removed so the next run downloads again
    instead of treating it as cached.

    Raises:
        DownloadError: If the request fails.
    """
    destination.parent.mkdir(parents=True, exist_ok=True)
    try:
        with requests.get(
            url,
            stream=True,
            timeout=DEFAULT_TIMEOUT_SECONDS,
            headers={"User-Agent": DEFAULT_USER_AGENT},
        ) as response:
            response.raise_for_status()
            total_size = int(response.headers.get("content-length", 0))

            with (
                destination.open("wb") as output,
                tqdm(
                    desc=f"Downloading {destination.name}",
                    total=total_size,
                    unit="iB",
                    unit_scale=True,
                    unit_divisor=1024,
                ) as bar,
            ):
                for chunk in response.iter_content(chunk_size=8192):
                    bar.update(output.write(chunk))

    except requests.RequestException as e:
        destination.unlink(missing_ok=True)
        raise DownloadError(f"Could not download CLDR archive from {url}: {e}") from e


def display_name_members(archive: zipfile.ZipFile) -> list[zipfile.ZipInfo]:
    """Members of the locale-name and currency packages of a cldr-json archive."""
    return [
        member
        for member in archive.infolist()
        if member.filename.startswith(CLDR_PACKAGES)
    ]


def extract_archive(archive_path: Path, destination: Path) -> None:
    """Extract the display-name packages of a cldr-json archive.

    Only ``cldr-localenames-full`` and ``cldr-numbers-full`` are unpacked;
    the rest of the archive is not read.

    Raises:
        ExtractionError: If the archive is unreadable or holds neither package.
    """
    try:
        with zipfile.ZipFile(archive_path) as archive:
            members = display_name_members(archive)
            if not members:
                packages = ", ".join(name.rstrip("/") for name in CLDR_PACKAGES)
                raise ExtractionError(
                    f"CLDR archive '{archive_path}' contains none of: {packages}."
                )
            for member in tqdm(
                members, desc=f"Extracting {archive_path.name}", unit="file"
            ):
                archive.extract(member, destination)
    except zipfile.BadZipFile as e:
        raise ExtractionError(
            f"CLDR archive '{archive_path}' is not a valid zip file. It may be corrupted."
        ) from e
    except OSError as e:
        raise ExtractionError(f"Could not extract CLDR archive '{archive_path}': {e}") from e


def load_json(path: Path) -> dict:
    """Load JSON file from disk."""
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def read_lines(path: Path) -> list[str]:
    """Read a resource file as lines, split on ``\\n``, ``\\r`` and ``\\r\\n`` only."""
    lines = path.read_text(encoding="utf-8").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


def write_lines(path: Path, lines: Iterable[str]) -> None:
    """Truncate or create ``path`` and write each line with a newline."""
    path.parent.mkdir(parents=True, exist_ok=True)
    _ = path.write_text("".join(f"{line}\n" for line in lines), encoding="utf-8")
