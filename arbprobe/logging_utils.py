import logging
from logging import config

from arbprobe.config.envs import envs


class AddAttrsFilter(logging.Filter):
    """
    A logging filter that adds extra attributes to log records.
    """

    def __init__(self, attrs: dict):
        super().__init__()
        self.attrs = attrs

    def filter(self, record):
        for key, value in self.attrs.items():
            setattr(record, key, value)
        return True


def logging_basic_config(filename=None):
    format = "%(asctime)s - %(name)s [%(levelname)s] - %(message)s"
    if filename is not None:
        logging.basicConfig(level=envs.LOGGING_LEVEL, format=format, filename=filename)
        return

    cfg = dict(
        disable_existing_loggers=False,
        version=1,
        formatters={
            "simple": {
                "format": (
                    "%(asctime)s"
                    " - %(service_name)s"
                    " - %(filename)s:%(lineno)s:%(funcName)s"
                    " - %(levelname)s"
                    " - %(message)s"
                )
            },
        },
        handlers={
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG",
                "formatter": "simple",
                # stdout carries the report itself
                "stream": "ext://sys.stderr",
                "filters": ["add_attrs"],
            },
        },
        filters={
            "add_attrs": {
                "()": AddAttrsFilter,
                "attrs": {
                    "service_name": envs.SERVICE_NAME,
                },
            },
        },
        root={
            "handlers": ["console"],
            "level": envs.LOGGING_LEVEL,
        },
    )
    config.dictConfig(cfg)

    # web3 logs every provider request at DEBUG
    logging.getLogger("web3").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
