import logging.config

from authparse.conf import Settings


def get_logging_config(settings: Settings, cli_mode: bool = False) -> dict:
    log_level = "DEBUG" if settings.logging.debug else "INFO"
    handler = "rich" if settings.logging.rich else "console"

    if cli_mode:
        authparse_handler = "cli"
    else:
        authparse_handler = handler

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "{asctime} {name} {levelname} (pid: {process}) {message}",
                "style": "{",
            },
            "rich": {
                "format": "{name} {message}",
                "style": "{",
            },
            "plain": {"format": "%(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "verbose",
                "stream": "ext://sys.stderr",
            },
            "cli": {
                "class": "logging.StreamHandler",
                "formatter": "plain",
                "stream": "ext://sys.stderr",
            },
            "rich": {
                "class": "rich.logging.RichHandler",
                "level": log_level,
                "formatter": "rich",
                "log_time_format": lambda x: x.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3],
                "rich_tracebacks": True,
            },
        },
        "root": {
            "handlers": [handler],
            "level": "WARNING",
        },
        "loggers": {
            "authparse": {
                "handlers": [authparse_handler],
                "level": log_level,
                "propagate": False,
            },
            "authparse.signature": {
                "level": log_level,
                "propagate": True,
            },
        },
    }

    return logging_config


def setup_logging(settings: Settings, cli_mode: bool = False) -> None:
    logging_config = get_logging_config(settings, cli_mode)
    logging.config.dictConfig(logging_config)
