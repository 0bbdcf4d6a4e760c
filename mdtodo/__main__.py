"""
Run the todo backend with uvicorn: ``python -m mdtodo``.
"""

from __future__ import annotations

import logging

import uvicorn

from mdtodo.config import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(name)s %(levelname)s %(asctime)s %(message)s",
        datefmt="%m/%d/%Y %I:%M:%S %p",
    )
    logger.info("Server running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(
        "mdtodo.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
