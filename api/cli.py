#!/usr/bin/env python3
"""CLI for Users API management tasks.

Usage:
    python cli.py <command>

Commands:
    serve      Run the API with uvicorn on HOST:PORT (default 0.0.0.0:8080)
    check-db   Verify the database is reachable
"""

import argparse
import asyncio
import logging
import sys

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def cmd_serve() -> int:
    """Run the API server."""
    import uvicorn

    from core.config import get_settings

    settings = get_settings()
    logger.info(f"Server running on http://{settings.host}:{settings.port}")
    uvicorn.run("main:app", host=settings.host, port=settings.port)
    return 0


async def _check_db() -> None:
    from core.database import check_db_connection, create_engine, dispose_engine

    engine = create_engine()
    try:
        await check_db_connection(engine)
    finally:
        await dispose_engine(engine)


def cmd_check_db() -> int:
    """Verify the database is reachable."""
    logger.info("Checking database connectivity...")
    try:
        asyncio.run(_check_db())
    except Exception as e:
        logger.error(f"Database unreachable: {e}")
        return 1
    logger.info("Database reachable")
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Users API CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("serve", help="Run the API server")
    subparsers.add_parser("check-db", help="Verify the database is reachable")

    args = parser.parse_args()

    if args.command == "serve":
        return cmd_serve()
    elif args.command == "check-db":
        return cmd_check_db()
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
