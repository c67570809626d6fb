from portal_page.config import PageConfig, SiteConfig, load_site_config
from portal_page.fragments import Fragments, load_fragments
from portal_page.home import SitePaths, ensure_site_layout, resolve_site_root
from portal_page.render import render, render_page, tracking_image_url

__version__ = "0.1.0"

__all__ = [
    "Fragments",
    "PageConfig",
    "SiteConfig",
    "SitePaths",
    "__version__",
    "ensure_site_layout",
    "load_fragments",
    "load_site_config",
    "render",
    "render_page",
    "resolve_site_root",
    "tracking_image_url",
]
