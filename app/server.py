"""
Server runner.

Usage:
  PORT=3000 python -m app.server
"""

from __future__ import annotations

import logging

import uvicorn

from Security.security_config import SECURITY_SETTINGS

logger = logging.getLogger("search.server")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s %(message)s")
    host = SECURITY_SETTINGS["HOST"]
    port = SECURITY_SETTINGS["PORT"]

    config = uvicorn.Config(
        "app.main:app",
        host=host,
        port=port,
        proxy_headers=True,
        log_config=None,
    )
    server = uvicorn.Server(config)
    # uvicorn logs "Uvicorn running on ..." itself once the socket is bound.
    logger.info("Starting web server on %s:%s", host, port)
    server.run()


if __name__ == "__main__":
    main()
