"""Entry point serving the Catalog API with uvicorn.

Host and port are read from the ``CATALOG_HOST`` and ``CATALOG_PORT``
environment variables.  Database location, log level and other
application settings are described in ``catalog_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from catalog_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted.

    Defaults are ``0.0.0.0`` and ``8000``.
    """
    host = os.getenv("CATALOG_HOST", "0.0.0.0")
    port = int(os.getenv("CATALOG_PORT", "8000"))
    config = Config(app=app, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


def main() -> None:
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        logging.getLogger(__name__).info("Catalog API stopped")


if __name__ == "__main__":
    main()
