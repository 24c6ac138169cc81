"""Command line launcher for the bookstore API.

Usage: bookstore-server [--profile dev|prod] [--host HOST] [--port PORT] [--reload]

`--profile` is the single switch between the embedded SQLite database
(`dev`) and the external database configured through
`BOOKSTORE_DATABASE_URL` (`prod`).
"""
import argparse
import logging
import os
from typing import List, Optional

import uvicorn

from .config import PROFILES

logger = logging.getLogger("bookstore.server")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bookstore-server", description="Run the Online Bookstore API")
    parser.add_argument('--profile', choices=PROFILES, help='Configuration profile (default: $BOOKSTORE_PROFILE or dev)')
    parser.add_argument('--host', help='Bind address (default: $HOST or 127.0.0.1)')
    parser.add_argument('--port', type=int, help='Bind port (default: $PORT or 8080)')
    parser.add_argument('--reload', action='store_true', help='Reload on code changes (development only)')
    return parser


def main(argv: Optional[List[str]] = None):
    args = build_parser().parse_args(argv)
    # the app reads its settings at import time, so export the profile first
    if args.profile:
        os.environ["BOOKSTORE_PROFILE"] = args.profile
    from .config import get_settings
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    host = args.host or settings.HOST
    port = args.port or settings.PORT
    logger.info("Starting bookstore API profile=%s on %s:%s", settings.PROFILE, host, port)
    uvicorn.run("bookstore.main:app", host=host, port=port, reload=args.reload)


if __name__ == '__main__':
    main()
