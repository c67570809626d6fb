from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SitePaths:
    root: Path
    logs_dir: Path

    @property
    def site_config_path(self) -> Path:
        return self.root / "site.json"

    @property
    def legacy_config_path(self) -> Path:
        return self.root / "config.inc"

    @property
    def banner_path(self) -> Path:
        return self.root / "banner.inc"

    def resolve(self, raw: str) -> Path:
        """Resolve a fragment path; relative paths are taken from the site root."""

        candidate = Path(raw).expanduser()
        if not candidate.is_absolute():
            candidate = self.root / candidate
        return candidate


def resolve_site_root(environ: dict[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ

    raw = (env.get("PORTAL_PAGE_SITE") or "").strip()
    if raw:
        return Path(raw).expanduser().resolve()

    # The site directory plays the role of a document root.
    return Path.cwd().resolve()


def ensure_site_layout(root: Path, *, logs_dir: Path | None = None) -> SitePaths:
    root.mkdir(parents=True, exist_ok=True)

    logs = logs_dir if logs_dir is not None else root / "logs"
    logs.mkdir(parents=True, exist_ok=True)

    return SitePaths(root=root, logs_dir=logs)
