"""Entry point for running explorerd.

This module provides the CLI entry point for starting the daemon.
"""

import logging
import sys

import uvicorn

from .config import load_config

logger = logging.getLogger(__name__)


def run(host: str | None = None, port: int | None = None) -> None:
    """Start the uvicorn server.

    Args:
        host: Override the configured listen address
        port: Override the configured listen port
    """
    config = load_config()

    uvicorn.run(
        "explorerd.main:app",
        host=host or config.host,
        port=port or config.port,
        log_level=config.log_level.lower(),
        workers=config.workers,
    )


def main() -> None:
    """Run the explorerd daemon."""
    try:
        run()
    except KeyboardInterrupt:
        logger.info("Received interrupt, shutting down")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Failed to start daemon: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
