from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from portal_page.config import (
    PageConfig,
    SiteConfig,
    load_site_config,
    resolve_logs_dir,
)
from portal_page.home import ensure_site_layout


def test_load_site_config_defaults_when_missing(tmp_path: Path) -> None:
    paths = ensure_site_layout(tmp_path)
    cfg = load_site_config(paths)

    assert isinstance(cfg, SiteConfig)
    assert cfg.title == ""
    assert cfg.group_id is None
    assert cfg.content_file == ""
    assert cfg.network.bind_host == "127.0.0.1"


def test_load_site_config_reads_site_json(site: Path) -> None:
    cfg = load_site_config(ensure_site_layout(site))

    assert cfg.page() == PageConfig(title="Serial Lookup", group_id=310, content_file="serial.inc")


def test_load_site_config_accepts_camel_case_keys(tmp_path: Path) -> None:
    paths = ensure_site_layout(tmp_path)
    paths.site_config_path.write_text(
        json.dumps({"title": "T", "groupId": 7, "contentFragmentPath": "c.inc"}),
        encoding="utf-8",
    )

    cfg = load_site_config(paths)
    assert cfg.group_id == 7
    assert cfg.content_file == "c.inc"


def test_load_site_config_partial_values_render_blank(tmp_path: Path) -> None:
    paths = ensure_site_layout(tmp_path)
    paths.site_config_path.write_text(json.dumps({"content_file": "c.inc"}), encoding="utf-8")

    page = load_site_config(paths).page()
    assert page.title == ""
    assert page.group_id is None


@pytest.mark.parametrize("group_id", [-1, "not-an-int"])
def test_load_site_config_validation_error(tmp_path: Path, group_id) -> None:
    paths = ensure_site_layout(tmp_path)
    paths.site_config_path.write_text(json.dumps({"group_id": group_id}), encoding="utf-8")

    with pytest.raises(ValidationError):
        load_site_config(paths)


def test_load_site_config_falls_back_to_legacy_config_inc(tmp_path: Path) -> None:
    paths = ensure_site_layout(tmp_path)
    paths.legacy_config_path.write_text(
        '<?php\n$content_file = "serial.inc";\n$group_id = 310;\n?>\n',
        encoding="utf-8",
    )

    cfg = load_site_config(paths)
    assert cfg.content_file == "serial.inc"
    assert cfg.group_id == 310
    assert cfg.title == ""


def test_site_json_wins_over_legacy_config(site: Path) -> None:
    paths = ensure_site_layout(site)
    paths.legacy_config_path.write_text('$title = "Old";', encoding="utf-8")

    assert load_site_config(paths).title == "Serial Lookup"


def test_resolve_logs_dir_override(tmp_path: Path) -> None:
    default = resolve_logs_dir(tmp_path, SiteConfig())
    custom = resolve_logs_dir(
        tmp_path, SiteConfig.model_validate({"logging": {"dir": "custom_logs"}})
    )

    assert default == tmp_path / "logs"
    assert custom == (tmp_path / "custom_logs").resolve()
