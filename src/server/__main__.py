"""Run the conversion service with ``python -m server``."""

import logging

import uvicorn

from server.server_config import HOST, LOG_LEVEL, PORT, RELOAD

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL)
    logger.info("Starting md2slack server", extra={"host": HOST, "port": PORT, "reload": RELOAD})

    uvicorn.run(
        "server.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        log_config=None,  # uvicorn logs through the root handler
    )


if __name__ == "__main__":
    main()
