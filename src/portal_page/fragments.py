from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from portal_page.config import PageConfig
from portal_page.home import SitePaths

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Fragments:
    content: str = ""
    banner: str | None = None


def _read_fragment(path: Path) -> str:
    data = path.read_bytes()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        # Older project pages are often Latin-1; every byte sequence decodes.
        return data.decode("latin-1")


def load_content_fragment(paths: SitePaths, content_file: str) -> str:
    """Read the project's content fragment.

    A blank path or an unreadable file yields an empty content region; the
    failure is logged and the page still renders.
    """

    raw = (content_file or "").strip()
    if not raw:
        logger.warning("No content_file configured; content region will be empty")
        return ""

    path = paths.resolve(raw)
    try:
        return _read_fragment(path)
    except OSError as exc:
        logger.warning("Content fragment %s could not be read: %s", path, exc)
        return ""


def load_banner_fragment(paths: SitePaths) -> str | None:
    path = paths.banner_path
    if not path.is_file():
        return None
    try:
        return _read_fragment(path)
    except OSError as exc:
        logger.warning("Banner fragment %s could not be read: %s", path, exc)
        return None


def load_fragments(paths: SitePaths, page: PageConfig) -> Fragments:
    return Fragments(
        content=load_content_fragment(paths, page.content_file),
        banner=load_banner_fragment(paths),
    )
