from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

import uvicorn

from portal_page.app import LOG_FORMAT, create_app
from portal_page.config import load_site_config
from portal_page.home import SitePaths, resolve_site_root
from portal_page.render import render


def _site_root(raw: str | None) -> Path:
    if raw:
        return Path(raw).expanduser().resolve()
    return resolve_site_root()


def _serve(args: argparse.Namespace) -> int:
    root = _site_root(args.site)
    config = load_site_config(SitePaths(root=root, logs_dir=root / "logs"))

    host = args.host or os.environ.get("PORTAL_PAGE_BIND") or config.network.bind_host

    env_port = os.environ.get("PORTAL_PAGE_PORT")
    if args.port is not None:
        port = args.port
    elif env_port:
        port = int(env_port)
    else:
        port = config.network.port

    uvicorn.run(create_app(root), host=host, port=port)
    return 0


def _render(args: argparse.Namespace) -> int:
    root = _site_root(args.site)
    paths = SitePaths(root=root, logs_dir=root / "logs")
    config = load_site_config(paths)
    html = render(config.page(), paths)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    else:
        sys.stdout.write(html)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portal-page",
        description="Render a project page inside the hosting portal's frame.",
    )
    parser.add_argument(
        "--site", default=None, help="Site directory (default: $PORTAL_PAGE_SITE or cwd)"
    )

    sub = parser.add_subparsers(dest="command")

    serve = sub.add_parser("serve", help="Serve the page over HTTP (default)")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.set_defaults(func=_serve)

    rend = sub.add_parser("render", help="Render the page once")
    rend.add_argument("--output", "-o", default=None, help="Write to this file instead of stdout")
    rend.set_defaults(func=_render)

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, handlers=[logging.StreamHandler()])

    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is None:
        args = parser.parse_args([*(argv if argv is not None else sys.argv[1:]), "serve"])
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
