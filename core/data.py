from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Tuple

import requests

from core.diagnostics import WorkbookError
from core.models import ParseResult
from core.parser import parse_workbook


logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[1]
WORKBOOK_NAME = "NHSExcel.xlsx"
SOURCE_ENV = "CLUB_HUB_WORKBOOK"
FETCH_TIMEOUT = 20.0


def get_workbook_source() -> str:
    """File path or http(s) URL of the workbook; env var wins over DATA_DIR."""
    return os.environ.get(SOURCE_ENV, "").strip() or str(DATA_DIR / WORKBOOK_NAME)


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


def file_signature(path: Path) -> Tuple[str, float]:
    return str(path), path.stat().st_mtime


def fetch_workbook_bytes(url: str, *, timeout: float = FETCH_TIMEOUT) -> bytes:
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise WorkbookError(f"Could not download the workbook from {url}: {exc}") from exc
    return resp.content


def read_workbook_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise WorkbookError(f"Could not read the workbook file {path.name}: {exc}") from exc


@lru_cache(maxsize=4)
def _load_file_cached(file_sig: Tuple[str, float]) -> ParseResult:
    path = Path(file_sig[0])
    logger.info("parsing workbook %s", path)
    return parse_workbook(read_workbook_bytes(path))


def load_snapshot(source: str | None = None) -> ParseResult:
    """Load and parse the workbook.

    Local files are cached per (path, mtime); URLs are fetched on every
    call. Failures are not retried here; the next call starts fresh.
    """
    source = source or get_workbook_source()
    if is_url(source):
        logger.info("fetching workbook %s", source)
        return parse_workbook(fetch_workbook_bytes(source))
    path = Path(source)
    if not path.exists():
        raise WorkbookError(f"Workbook not found: {path.name}. Place it at {path} or set {SOURCE_ENV}.")
    return _load_file_cached(file_signature(path))


def clear_cache() -> None:
    _load_file_cached.cache_clear()
