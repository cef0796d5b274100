from logging.handlers import RotatingFileHandler
from cobranca_pix.config import LOG_DIR
import os
import logging


def configurar_logging():
    logger = logging.getLogger()

    if getattr(logger, '_cobranca_pix_configurado', False):
        return

    if not os.path.exists(LOG_DIR):
        os.makedirs(LOG_DIR)

    logger.setLevel(logging.INFO)

    file_handler = RotatingFileHandler(
        os.path.join(LOG_DIR, 'app.log'),
        maxBytes=2000000,
        backupCount=5
    )

    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(
        '[%(asctime)s] [%(levelname)s] - [%(message)s]'
    ))

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG)
    console.setFormatter(logging.Formatter(
        '%(levelname)s: %(message)s'
    ))

    logger.addHandler(file_handler)
    logger.addHandler(console)
    logger._cobranca_pix_configurado = True
