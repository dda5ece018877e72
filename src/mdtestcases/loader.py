"""Load fixture documents from disk or over HTTP."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

import httpx

from mdtestcases.collection import get_test_cases
from mdtestcases.config import MDTESTCASES_FETCH_TIMEOUT_S, MDTESTCASES_USER_AGENT
from mdtestcases.exceptions import DocumentNotFoundError, LoadError
from mdtestcases.options import MergeFn
from mdtestcases.schemas import TestCase

OptionsT = TypeVar("OptionsT")

_URL_SCHEMES = ("http://", "https://")

logger = logging.getLogger(__name__)


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.startswith(_URL_SCHEMES)


def load_document(source: str | Path) -> str:
    """Read a Markdown document from a local path or an http(s) URL.

    Raises:
        DocumentNotFoundError: If the file or remote document does not exist.
        LoadError: If the document cannot be read, fetched, or decoded.
    """
    if is_url(source):
        return _fetch_document(str(source))

    path = Path(source)
    if not path.is_file():
        raise DocumentNotFoundError(f"Fixture document not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise LoadError(f"Failed to read {path}: {exc}") from exc


def _fetch_document(url: str) -> str:
    logger.info("Fetching fixture document from %s", url)
    try:
        response = httpx.get(
            url,
            follow_redirects=True,
            timeout=MDTESTCASES_FETCH_TIMEOUT_S,
            headers={"User-Agent": MDTESTCASES_USER_AGENT},
        )
    except httpx.RequestError as exc:
        raise LoadError(f"Failed to fetch {url}: {exc}") from exc

    if response.status_code == 404:
        raise DocumentNotFoundError(f"Fixture document not found at {url}")
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise LoadError(f"Failed to fetch {url}: {exc}") from exc
    return response.text


def load_test_cases(
    source: str | Path,
    root_options: OptionsT,
    *,
    merge: MergeFn[OptionsT] | None = None,
) -> list[TestCase[OptionsT]]:
    """Load a document and collect its test cases."""
    return get_test_cases(load_document(source), root_options, merge=merge)
