from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, Field

from portal_page.home import SitePaths
from portal_page.legacy import read_legacy_config

logger = logging.getLogger(__name__)


class PageConfig(BaseModel):
    """Values substituted into the page template for one render."""

    title: str = Field(default="")
    group_id: int | None = Field(
        default=None,
        ge=0,
        validation_alias=AliasChoices("group_id", "groupId"),
        description="Group id reported to the portal's statistics tracker",
    )
    content_file: str = Field(
        default="",
        validation_alias=AliasChoices("content_file", "contentFragmentPath"),
        description="Content fragment path; if relative, resolved under the site root",
    )


class NetworkConfig(BaseModel):
    bind_host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=1, le=65535)


class LoggingConfig(BaseModel):
    dir: str | None = Field(
        default=None,
        description="Optional logs directory; if relative, resolved under the site root",
    )
    max_size_mb: int = Field(
        default=10, ge=1, description="Max size of a log file in MB before rolling."
    )
    backup_count: int = Field(default=5, ge=1, description="Number of log archives to keep.")


class SiteConfig(PageConfig):
    network: NetworkConfig = Field(default_factory=NetworkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    def page(self) -> PageConfig:
        return PageConfig(
            title=self.title,
            group_id=self.group_id,
            content_file=self.content_file,
        )


def _read_json(path: Path) -> dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)


def load_site_config(paths: SitePaths) -> SiteConfig:
    """Load config from <site>/site.json, falling back to <site>/config.inc.

    - If neither exists: returns defaults (blank title, no group id, no content).
    - Validation is performed by Pydantic.
    """

    if paths.site_config_path.exists():
        raw = _read_json(paths.site_config_path)
        return SiteConfig.model_validate(raw)

    if paths.legacy_config_path.exists():
        raw = read_legacy_config(paths.legacy_config_path)
        return SiteConfig.model_validate(raw)

    logger.warning("No site.json or config.inc in %s; using blank page config", paths.root)
    return SiteConfig()


def resolve_logs_dir(root: Path, config: SiteConfig) -> Path:
    raw = config.logging.dir
    if raw is None or not str(raw).strip():
        return root / "logs"
    candidate = Path(raw).expanduser()
    if not candidate.is_absolute():
        candidate = (root / candidate).resolve()
    return candidate
