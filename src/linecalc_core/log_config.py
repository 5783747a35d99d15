# src/linecalc_core/log_config.py
import logging
import sys

def setup_logging(level=logging.INFO, stream=None):
    """ Configures basic logging to stdout, or to `stream` when one is given. """
    log_formatter = logging.Formatter(
        "%(asctime)s [%(levelname)-5.5s] [%(name)s] %(message)s"
    )
    root_logger = logging.getLogger()

    # Replace whatever handlers a previous call (or the host application) installed.
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    console_handler.setFormatter(log_formatter)
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
    logging.debug("Logging configured at level %s.", logging.getLevelName(level))
