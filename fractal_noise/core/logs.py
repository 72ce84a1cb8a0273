# -*- coding: utf-8 -*-
"""Logging configuration and support."""
# Part of fractal-noise (https://github.com/whutch/fractal-noise)
# :copyright: (c) 2016 - 2018 Will Hutcheson
# :license: MIT (https://github.com/whutch/fractal-noise/blob/master/LICENSE)

from datetime import datetime
import logging
from logging.config import dictConfig
from os import makedirs
from os.path import dirname, exists
import re

from .. import BASE_PACKAGE, settings


class _Formatter(logging.Formatter):

    """Custom formatter for our logging handlers."""

    def formatTime(self, record, datefmt=None):
        """Convert a LogRecord's creation time to a string.

        If `datefmt` is provided, it will be used to convert the time through
        datetime.strftime.  If not, it falls back to the formatTime method of
        logging.Formatter, which converts the time through time.strftime.

        There is additional parsing done to allow for the %F argument to be
        converted to 3-digit zero-padded milliseconds, as an alternative to
        the %f argument's usual 6-digit microseconds.

        :param LogRecord record: The record to be formatted
        :param str datefmt: A formatting string to be passed to strftime
        :returns str: A formatted time string

        """
        if datefmt:
            msecs = str(int(record.msecs)).zfill(3)
            datefmt = re.sub(r"(?<!%)%F", msecs, datefmt)
            parsed_time = datetime.fromtimestamp(record.created)
            return parsed_time.strftime(datefmt)
        else:
            return super().formatTime(record)


def _build_config():
    """Build a logging configuration dict from the current settings.

    :returns dict: A configuration suitable for logging.config.dictConfig

    """
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "console",
        },
    }
    if settings.LOG_PATH:
        # Make sure the folder where our log will go exists.
        if not exists(dirname(settings.LOG_PATH)):
            makedirs(dirname(settings.LOG_PATH))
        handlers["file"] = {
            "class": "logging.handlers.TimedRotatingFileHandler",
            "level": "DEBUG",
            "formatter": "file",
            "filename": settings.LOG_PATH,
            "when": settings.LOG_ROTATE_WHEN,
            "interval": settings.LOG_ROTATE_INTERVAL,
            "utc": settings.LOG_UTC_TIMES,
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "file": {
                "()": _Formatter,
                "format": "%(asctime)s  %(name)-24s  %(levelname)-8s"
                          " %(message)s",
                "datefmt": settings.LOG_TIME_FORMAT_FILE,
            },
            "console": {
                "()": _Formatter,
                "format": "%(asctime)s  %(name)-20s  %(levelname)-8s"
                          " %(message)s",
                "datefmt": settings.LOG_TIME_FORMAT_CONSOLE,
            },
        },
        "handlers": handlers,
        "loggers": {
            BASE_PACKAGE: {
                "handlers": list(handlers),
                "level": settings.LOG_LEVEL,
                "propagate": False,
            },
        },
    }


def configure_logging():
    """Load our log configuration into Python's logging module.

    This is called once when this module is first imported; call it again
    after changing any of the logging settings to apply them.

    :returns None:

    """
    dictConfig(_build_config())


configure_logging()


def get_logger(name=None):
    """Fetch an instance of logging.Logger under this package's namespace.

    Using this as a middle-man ensures that our logging configuration will
    always be loaded before a Logger is used, as none of the other code will
    load the logging module directly.

    :param str name: The name of the logger, relative to the package
    :returns logging.Logger: A Logger instance

    """
    if not name:
        return logging.getLogger(BASE_PACKAGE)
    return logging.getLogger("{}.{}".format(BASE_PACKAGE, name))
