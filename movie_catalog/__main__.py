import logging

import uvicorn

from .config import Settings, configure_logging

logger = logging.getLogger("movie_catalog")

APP_IMPORT = "movie_catalog.app:app"


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info("Server running on %s:%s", settings.host, settings.port)
    # import string: the app module is loaded once, after logging is set up
    uvicorn.run(
        APP_IMPORT,
        host=settings.host,
        port=settings.port,
        log_level=logging.getLevelName(settings.log_level),
    )


if __name__ == "__main__":
    main()
