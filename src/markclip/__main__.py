# -*- coding: utf-8 -*-
"""
Entry point to run the service via python -m markclip.
"""
import argparse

import uvicorn

from markclip.config import settings


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="markclip", description="Run the markclip HTTP service.")
    parser.add_argument("--host", default=settings.HOST, help=f"bind address (default {settings.HOST})")
    parser.add_argument("--port", type=int, default=settings.PORT, help=f"port (default {settings.PORT})")
    parser.add_argument("--reload", action="store_true", help="reload on source changes")
    return parser.parse_args(argv)


def main(argv=None):
    """Start the Uvicorn server."""
    args = parse_args(argv)
    uvicorn.run(
        "markclip.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
