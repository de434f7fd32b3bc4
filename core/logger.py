import logging

from core.config import config


def init_log(log_name: str = __name__):

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(levelname)s - [%(name)s] %(message)s'
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger(log_name)
