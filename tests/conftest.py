from __future__ import annotations

import json
from pathlib import Path

import pytest


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A site directory holding the Serial Lookup example page."""

    (tmp_path / "serial.inc").write_text("<P>Hello</P>", encoding="utf-8")
    (tmp_path / "site.json").write_text(
        json.dumps({"title": "Serial Lookup", "group_id": 310, "content_file": "serial.inc"}),
        encoding="utf-8",
    )
    return tmp_path
