"""Entry point for the Crop Price Dashboard server.

Starts the FastAPI application under Uvicorn on the host and port
from the settings (``HOST``/``PORT`` environment variables, default
``0.0.0.0:1000``).

Uvicorn handles SIGINT and SIGTERM by shutting the application down,
which closes the listings store.  Afterwards the process exits with
code 0 whether or not the store closed cleanly.  If the application
fails to start (for example because the database cannot be opened)
the exit code is 3, as with ``uvicorn.run``.

Usage:
    python run.py
"""
import asyncio
import logging
import signal
import sys

from uvicorn import Config, Server

from crop_dashboard_api.app.core.config import settings
from crop_dashboard_api.app.main import app


logger = logging.getLogger(__name__)

STARTUP_FAILURE = 3


def _exit_cleanly(signum, frame) -> None:
    logger.info("Received signal %s, exiting", signum)
    sys.exit(0)


async def main() -> bool:
    """Serve the application until interrupted.

    Returns ``False`` if the application never finished starting.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        log_config=None,
    )
    server = Server(config)
    await server.serve()
    return server.started


if __name__ == "__main__":
    # Uvicorn re-raises the captured signal once shutdown is complete;
    # SIGINT surfaces as KeyboardInterrupt, SIGTERM goes through this handler.
    signal.signal(signal.SIGTERM, _exit_cleanly)
    started = True
    try:
        started = asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
    sys.exit(0 if started else STARTUP_FAILURE)
