"""Tests for archive and resource file I/O."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest
import requests

from localenames import io
from localenames.io import (
    DownloadError,
    ExtractionError,
    download_file,
    extract_archive,
    read_lines,
    write_lines,
)


class TestExtractArchive:
    def test_extracts_display_name_packages_only(self, tmp_path: Path) -> None:
        archive = tmp_path / "cldr.zip"
        with zipfile.ZipFile(archive, "w") as handle:
            handle.writestr("cldr-localenames-full/main/en/languages.json", "{}")
            handle.writestr("cldr-numbers-full/main/en/currencies.json", "{}")
            handle.writestr("cldr-dates-full/main/en/ca-gregorian.json", "{}")

        destination = tmp_path / "out"
        extract_archive(archive, destination)

        assert (destination / "cldr-localenames-full/main/en/languages.json").is_file()
        assert (destination / "cldr-numbers-full/main/en/currencies.json").is_file()
        assert not (destination / "cldr-dates-full").exists()

    def test_corrupt_archive(self, tmp_path: Path) -> None:
        archive = tmp_path / "broken.zip"
        archive.write_bytes(b"not a zip")
        with pytest.raises(ExtractionError, match="corrupted"):
            extract_archive(archive, tmp_path / "out")

    def test_archive_without_display_name_packages(self, tmp_path: Path) -> None:
        archive = tmp_path / "cldr.zip"
        with zipfile.ZipFile(archive, "w") as handle:
            handle.writestr("cldr-dates-full/main/en/ca-gregorian.json", "{}")
        with pytest.raises(ExtractionError, match="cldr-localenames-full"):
            extract_archive(archive, tmp_path / "out")
        assert not (tmp_path / "out").exists()


class TestDownloadFile:
    def test_request_failure(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(*args: object, **kwargs: object) -> None:
            raise requests.ConnectionError("offline")

        monkeypatch.setattr(io.requests, "get", fail)
        destination = tmp_path / "cache" / "cldr.zip"
        with pytest.raises(DownloadError, match="CLDR archive .*offline"):
            download_file("https://example.invalid/cldr.zip", destination)
        assert not destination.exists()


class TestResourceLines:
    def test_round_trip(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "LocaleNames.properties"
        write_lines(path, ["# header", "en=English"])
        assert path.read_text(encoding="utf-8") == "# header\nen=English\n"
        assert read_lines(path) == ["# header", "en=English"]

    def test_write_truncates(self, tmp_path: Path) -> None:
        path = tmp_path / "LocaleNames.properties"
        path.write_text("a=1\nb=2\nc=3\n", encoding="utf-8")
        write_lines(path, ["a=1"])
        assert path.read_text(encoding="utf-8") == "a=1\n"

    def test_read_handles_crlf(self, tmp_path: Path) -> None:
        path = tmp_path / "LocaleNames.properties"
        path.write_bytes(b"en=English\r\nfr=French\r\n")
        assert read_lines(path) == ["en=English", "fr=French"]

    def test_read_splits_on_lone_carriage_return(self, tmp_path: Path) -> None:
        path = tmp_path / "LocaleNames.properties"
        path.write_bytes(b"en=English\rfr=French")
        assert read_lines(path) == ["en=English", "fr=French"]

    @pytest.mark.parametrize("separator", ["\f", "\x1c", "\x1d", "\x1e", "\x85", "\u2028"])
    def test_read_keeps_other_separators_inside_line(
        self, tmp_path: Path, separator: str
    ) -> None:
        path = tmp_path / "LocaleNames.properties"
        comment = f"# part one{separator}part two"
        path.write_text(f"{comment}\nen=English\n", encoding="utf-8")
        assert read_lines(path) == [comment, "en=English"]

    def test_read_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "LocaleNames.properties"
        path.write_text("", encoding="utf-8")
        assert read_lines(path) == []
