import logging
from typing import Annotated

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000
DEFAULT_GRAPHQL_PATH = "/graphql"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Service settings, read from CATALOG_* environment variables.

    Bad values for the port, GraphiQL flag, path or log level are logged and
    replaced by the default instead of failing startup.
    """

    model_config = SettingsConfigDict(env_prefix="CATALOG_")

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    graphql_path: str = DEFAULT_GRAPHQL_PATH
    graphiql: bool = True
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: Annotated[list[str], NoDecode] = []  # comma separated in env

    @classmethod
    def from_env(cls) -> "Settings":
        return cls()

    @field_validator("port", mode="wrap")
    @classmethod
    def _check_port(cls, value, handler):
        try:
            port = handler(value)
        except ValidationError:
            logger.warning("Invalid CATALOG_PORT value: %s. Using default: %s", value, DEFAULT_PORT)
            return DEFAULT_PORT
        if not 0 < port < 65536:
            logger.warning("CATALOG_PORT %s is out of range. Using default: %s", port, DEFAULT_PORT)
            return DEFAULT_PORT
        return port

    @field_validator("graphiql", mode="wrap")
    @classmethod
    def _check_graphiql(cls, value, handler):
        try:
            return handler(value)
        except ValidationError:
            logger.warning("Invalid CATALOG_GRAPHIQL value: %s. Using default: True", value)
            return True

    @field_validator("graphql_path", mode="before")
    @classmethod
    def _normalize_path(cls, value):
        path = "/" + str(value).strip().strip("/")
        if path == "/":
            logger.warning(
                "Invalid CATALOG_GRAPHQL_PATH value: %r. Using default: %s",
                value,
                DEFAULT_GRAPHQL_PATH,
            )
            return DEFAULT_GRAPHQL_PATH
        if path != value:
            logger.warning("CATALOG_GRAPHQL_PATH %r normalized to %s", value, path)
        return path

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_log_level(cls, value):
        level = str(value).strip().upper()
        # getLevelName maps known names to their int value
        if not isinstance(logging.getLevelName(level), int):
            logger.warning(
                "Invalid CATALOG_LOG_LEVEL value: %s. Using default: %s", value, DEFAULT_LOG_LEVEL
            )
            return DEFAULT_LOG_LEVEL
        return level

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value):
        if isinstance(value, str):
            return [o.strip() for o in value.split(",") if o.strip()]
        return value


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
