"""Tests for loading fixture documents."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import httpx
import pytest

from mdtestcases.exceptions import DocumentNotFoundError, LoadError
from mdtestcases.loader import is_url, load_document, load_test_cases
from mdtestcases.options import merge_toml_table


def _response(url: str, status_code: int, text: str = "") -> httpx.Response:
    return httpx.Response(status_code, text=text, request=httpx.Request("GET", url))


class TestIsUrl:
    """Tests for is_url helper."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("https://example.com/cases.md", True),
            ("http://example.com/cases.md", True),
            ("cases.md", False),
            ("ftp://example.com/cases.md", False),
            (Path("https:/example.com"), False),
        ],
    )
    def test_detects_http_urls(self, source: str | Path, expected: bool) -> None:
        assert is_url(source) is expected


class TestLoadDocument:
    """Tests for load_document."""

    def test_reads_local_file(self, tmp_path: Path) -> None:
        """Local paths are read as UTF-8."""
        path = tmp_path / "cases.md"
        path.write_text("# Café\n", encoding="utf-8")

        assert load_document(path) == "# Café\n"
        assert load_document(str(path)) == "# Café\n"

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file raises DocumentNotFoundError."""
        with pytest.raises(DocumentNotFoundError, match="not found"):
            load_document(tmp_path / "missing.md")

    def test_undecodable_file(self, tmp_path: Path) -> None:
        """Bytes that are not UTF-8 raise LoadError."""
        path = tmp_path / "cases.md"
        path.write_bytes(b"\xff\xfe# A\n")

        with pytest.raises(LoadError, match="Failed to read"):
            load_document(path)

    def test_fetches_urls(self) -> None:
        """URLs are fetched with a single GET."""
        url = "https://example.com/cases.md"
        response = _response(url, 200, "# A\n")
        with patch("mdtestcases.loader.httpx.get", return_value=response) as mock_get:
            result = load_document(url)

        assert result == "# A\n"
        mock_get.assert_called_once()
        assert mock_get.call_args.args == (url,)
        assert mock_get.call_args.kwargs["follow_redirects"] is True
        assert "User-Agent" in mock_get.call_args.kwargs["headers"]

    def test_remote_404(self) -> None:
        """A missing remote document raises DocumentNotFoundError."""
        url = "https://example.com/missing.md"
        with patch("mdtestcases.loader.httpx.get", return_value=_response(url, 404)):
            with pytest.raises(DocumentNotFoundError, match="not found"):
                load_document(url)

    def test_remote_server_error(self) -> None:
        """Other HTTP errors raise LoadError."""
        url = "https://example.com/cases.md"
        with patch("mdtestcases.loader.httpx.get", return_value=_response(url, 503)):
            with pytest.raises(LoadError, match="Failed to fetch"):
                load_document(url)

    def test_transport_error(self) -> None:
        """Network failures raise LoadError."""
        with patch(
            "mdtestcases.loader.httpx.get",
            side_effect=httpx.ConnectError("Connection refused"),
        ):
            with pytest.raises(LoadError, match="Connection refused"):
                load_document("https://example.com/cases.md")


class TestLoadTestCases:
    """Tests for load_test_cases."""

    def test_collects_from_file(self, tmp_path: Path) -> None:
        """Cases are collected from the loaded document."""
        path = tmp_path / "cases.md"
        path.write_text("# A\n\n```options\nfoo = 1\n```\n\n```\nx\n```\n", encoding="utf-8")

        (case,) = load_test_cases(path, {}, merge=merge_toml_table)

        assert case.name == "A"
        assert case.options == {"foo": 1}
        assert case.args == ("x",)

    @pytest.mark.integration
    def test_collects_fixture_document(self, fixtures_dir: Path) -> None:
        """The bundled fixture document yields three cases."""
        result = load_test_cases(fixtures_dir / "produce.md", {}, merge=merge_toml_table)

        assert [case.name for case in result] == ["Apple", "Pear", "Potato"]
        assert result[0].options == {"foo": 5, "bar": True}
