import logging
from pythonjsonlogger import jsonlogger

from .config import log_level


def setup_logger():
    logger = logging.getLogger()
    # Lambda reuses the process across invocations; install the handler once.
    for handler in logger.handlers:
        if isinstance(handler.formatter, jsonlogger.JsonFormatter):
            return
    logHandler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s',
                                         rename_fields={'levelname': 'level', 'asctime': 'timestamp'})
    logHandler.setFormatter(formatter)
    logger.addHandler(logHandler)
    logger.setLevel(log_level())
