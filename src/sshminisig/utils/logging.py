import logging
import sys

from ..config import LOG_LEVEL


def get_logger():
    logger = logging.getLogger("sshminisig")
    if not logger.handlers:
        # stdout is reserved for the token
        h = logging.StreamHandler(sys.stderr)
        fmt = logging.Formatter("[%(asctime)s] %(levelname)s %(message)s")
        h.setFormatter(fmt)
        logger.addHandler(h)
        logger.setLevel(LOG_LEVEL)
    return logger
