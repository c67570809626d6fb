from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portal_page import __version__
from portal_page.config import SiteConfig, load_site_config, resolve_logs_dir
from portal_page.errors import fail, status_to_code
from portal_page.home import SitePaths, ensure_site_layout, resolve_site_root
from portal_page.render import render

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _build_file_handler(paths: SitePaths, config: SiteConfig) -> RotatingFileHandler:
    handler = RotatingFileHandler(
        paths.logs_dir / "portal-page.log",
        maxBytes=config.logging.max_size_mb * 1024 * 1024,
        backupCount=config.logging.backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    return handler


def create_app(site_root: Path | None = None) -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        root = site_root if site_root is not None else resolve_site_root()
        config = load_site_config(SitePaths(root=root, logs_dir=root / "logs"))
        paths = ensure_site_layout(root, logs_dir=resolve_logs_dir(root, config))

        file_handler = _build_file_handler(paths, config)
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)
        root_logger.addHandler(file_handler)

        logger.info("Portal page starting up")
        logger.info(f"Site root: {paths.root}")
        logger.info(f"Logs directory: {paths.logs_dir}")

        app.state.site_paths = paths

        try:
            yield
        finally:
            root_logger.removeHandler(file_handler)
            file_handler.close()

    app = FastAPI(title="Portal Page", version=__version__, lifespan=_lifespan)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        response = await call_next(request)
        logger.info(f"{request.method} {request.url.path} - {response.status_code}")
        return response

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=fail(
                code=status_to_code(exc.status_code),
                message=exc.detail if isinstance(exc.detail, str) else "HTTP error",
            ).model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Failed to render %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content=fail(code="internal_error", message="Internal server error").model_dump(
                mode="json"
            ),
        )

    @app.get("/", response_class=HTMLResponse)
    @app.get("/index.html", response_class=HTMLResponse)
    async def page(request: Request) -> HTMLResponse:
        paths: SitePaths = request.app.state.site_paths
        # Re-read per request so edits to the site directory show up immediately.
        config = load_site_config(paths)
        return HTMLResponse(render(config.page(), paths))

    @app.get("/healthz")
    async def healthz() -> dict[str, str]:
        return {"status": "ok"}

    return app
