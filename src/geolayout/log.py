import logging
import sys

logger = logging.getLogger("geolayout")


class DuplicateFilter(logging.Filter):
    """A filter that removes duplicated successive log entries."""

    def filter(self, record):
        current_log = (record.module, record.levelno, record.msg, record.args)
        if current_log != getattr(self, "last_log", None):
            self.last_log = current_log
            return True
        return False


fstring = "%(name)s: [%(levelname)-8s] %(asctime)s %(message)s"

logger.setLevel(logging.WARNING)
logger.addFilter(DuplicateFilter())

f = logging.Formatter(fstring)


def stream_handler():
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(f)
    return handler


def set_level(level):
    """Set the package log level, e.g. ``set_level(logging.DEBUG)``."""
    logger.setLevel(level)


logger.addHandler(stream_handler())
