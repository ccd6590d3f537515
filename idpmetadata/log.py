# -*- coding: utf-8 -*-
import logging
from logging.handlers import RotatingFileHandler

logger = logging.getLogger('idpmetadata')

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(message)s'


def setup_logging(filename=None, level=logging.DEBUG):
    logging.basicConfig(level=level)
    logger.setLevel(level)
    if filename:
        handler = RotatingFileHandler(
            filename, maxBytes=500000, backupCount=1
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)
    return logger
