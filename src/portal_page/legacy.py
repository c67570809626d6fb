"""Reader for the PHP-style ``config.inc`` used by older project pages.

Only simple scalar assignments are understood::

    <?php
    $content_file = "serial.inc";
    $group_id = 310;
    ?>

Anything else (line and block comments, PHP tags, unknown statements) is
ignored.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

_ASSIGNMENT = re.compile(
    r"""\$(?P<name>[A-Za-z_]\w*)\s*=\s*
        (?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)'|(?P<num>-?\d+))
        \s*;""",
    re.VERBOSE,
)

_LINE_COMMENT = re.compile(r"^\s*(//|#)")
_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)

KNOWN_KEYS = ("title", "group_id", "content_file")


def parse_legacy_config(text: str) -> dict[str, Any]:
    out: dict[str, Any] = {}
    for line in _BLOCK_COMMENT.sub("", text).splitlines():
        if _LINE_COMMENT.match(line):
            continue
        for m in _ASSIGNMENT.finditer(line):
            name = m.group("name")
            if name not in KNOWN_KEYS:
                continue
            if m.group("num") is not None:
                out[name] = int(m.group("num"))
            elif m.group("dq") is not None:
                out[name] = m.group("dq")
            else:
                out[name] = m.group("sq")
    return out


def read_legacy_config(path: Path) -> dict[str, Any]:
    return parse_legacy_config(path.read_text(encoding="utf-8"))
