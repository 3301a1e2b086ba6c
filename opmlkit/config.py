import dataclasses
import functools
import logging.config

from environs import Env


@dataclasses.dataclass(kw_only=True, frozen=True)
class Settings:
    """Library settings.

    Read from `OPMLKIT_*` environment variables (or a `.env` file) by
    `from_env()`. An empty `user_agent` leaves httpx's own User-Agent header.
    """

    user_agent: str = ""
    http_timeout: float | None = None
    follow_redirects: bool = True
    indent: str = "\t"
    log_level: int = logging.INFO

    @classmethod
    def from_env(cls, env: Env | None = None) -> "Settings":
        """Loads settings from the environment."""
        if env is None:
            env = Env()
            env.read_env()

        with env.prefixed("OPMLKIT_"):
            indent = env("INDENT", default="\t")
            return cls(
                user_agent=env("USER_AGENT", default=""),
                http_timeout=env.float("HTTP_TIMEOUT", default=None),
                follow_redirects=env.bool("FOLLOW_REDIRECTS", default=True),
                indent=" " * int(indent) if indent.isdigit() else indent,
                log_level=env.log_level("LOG_LEVEL", default=logging.INFO),
            )


@functools.cache
def get_settings() -> Settings:
    """Returns Settings instance"""
    return Settings.from_env()


def configure_logging(level: int | None = None) -> None:
    """Sends `opmlkit` log records to the console."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "verbose": {
                    "format": "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "level": "DEBUG",
                    "class": "logging.StreamHandler",
                    "formatter": "verbose",
                },
            },
            "loggers": {
                "opmlkit": {
                    "handlers": ["console"],
                    "level": get_settings().log_level if level is None else level,
                    "propagate": False,
                },
            },
        }
    )
