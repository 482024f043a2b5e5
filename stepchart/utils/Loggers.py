import logging
import sys


def configure_console_logger(level=logging.INFO):
    logger = logging.getLogger()
    logger.setLevel(level)

    # Calling this twice shouldn't print every message twice
    for handler in logger.handlers:
        if getattr(handler, "name", None) == "stepchart-console":
            return

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.set_name("stepchart-console")
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
