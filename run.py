"""Entry point for the Employee Directory API.

This script serves the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as HOST, PORT, SEED_COUNT and LOG_LEVEL is read
from environment variables; see ``employee_api/app/core/config.py``
for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from employee_api.app.core.config import settings
from employee_api.app.main import app


async def main() -> None:
    """Start the API server using Uvicorn.

    Host and port are read from the ``HOST`` and ``PORT`` settings.
    Defaults are ``0.0.0.0`` and ``3000``.
    """
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server running on port %s", settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
