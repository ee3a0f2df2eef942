# =============================================================================
# app/server.py - Process Entry Point
# =============================================================================
# Validates configuration, then runs the app under uvicorn.
#
# Usage:
#   showcase-server
#   python -m app.server
#
# Exit codes:
#   0 - stopped by SIGINT/SIGTERM after a graceful shutdown
#   1 - required configuration missing (no port is bound)
# =============================================================================

import logging
import signal
import sys

import uvicorn

from app.config import load_settings
from app.exceptions import ConfigurationError
from app.main import configure_logging, create_app

logger = logging.getLogger(__name__)


def _exit_cleanly(signum, frame) -> None:
    """
    Exit 0 on a termination signal.

    uvicorn captures SIGINT/SIGTERM while serving, restores the previous
    handlers after shutdown and re-raises the signal. This handler is what
    receives it, instead of the default action killing the process.
    """
    logger.info(f"Received {signal.Signals(signum).name}, exiting")
    sys.exit(0)


def install_signal_handlers() -> None:
    """Route SIGINT and SIGTERM to a clean exit."""
    signal.signal(signal.SIGINT, _exit_cleanly)
    signal.signal(signal.SIGTERM, _exit_cleanly)


def main() -> None:
    """Start the server, or exit 1 if configuration is incomplete."""
    configure_logging()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(e.message)
        sys.exit(1)

    if settings.DEBUG:
        logging.getLogger().setLevel(logging.DEBUG)

    app = create_app(settings)
    install_signal_handlers()

    logger.info(f"App running at http://{settings.API_HOST}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.PORT,
        log_level="debug" if settings.DEBUG else "info",
    )


if __name__ == "__main__":
    main()
