import logging
import sys

from pathjoin.core import config
from pathjoin.services.self_check import SelfCheckError, run_self_check
from pathjoin.utils.logging_config import setup_logging

setup_logging(level=getattr(logging, config.LOG_LEVEL, logging.INFO), log_dir=config.LOG_DIR)
logger = logging.getLogger("main")


def main() -> int:
    try:
        run_self_check(flavour="posix")
    except SelfCheckError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
