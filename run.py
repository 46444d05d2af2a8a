"""Entry point for the Users API.

Serves the FastAPI application with Uvicorn.  Host, port, database
location and the minimum user age are read from environment variables
(see ``users_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from users_api.app.core.config import settings
from users_api.app.main import app


async def run_api() -> None:
    """Start the API server using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


def main() -> None:
    logging.getLogger(__name__).info(
        "Starting %s on %s:%s (minimum age %s)",
        settings.project_name,
        settings.host,
        settings.port,
        settings.minimum_age,
    )
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
