"""Page rendering.

`render_page` is pure: it only fills the template. `render` reads the
fragments from the site directory first.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from fastapi.templating import Jinja2Templates

from portal_page.config import PageConfig
from portal_page.fragments import Fragments, load_fragments
from portal_page.home import SitePaths

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"

PAGE_TEMPLATE: Final[str] = "page.html"
TRACKING_URL: Final[str] = "http://sourceforge.net/sflogo.php"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def tracking_image_url(group_id: int | None) -> str:
    value = "" if group_id is None else str(group_id)
    return f"{TRACKING_URL}?group_id={value}&type=1"


def render_page(page: PageConfig, fragments: Fragments) -> str:
    template = templates.get_template(PAGE_TEMPLATE)
    return template.render(
        title=page.title,
        tracking_url=tracking_image_url(page.group_id),
        content=fragments.content,
        banner=fragments.banner,
    )


def render(page: PageConfig, paths: SitePaths) -> str:
    return render_page(page, load_fragments(paths, page))
