import logging

from rich.logging import RichHandler

from config import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    logger = logging.getLogger()
    logger.setLevel(level)
    handler = RichHandler(markup=False, show_path=False, show_time=False)
    handler.setFormatter(logging.Formatter("%(name)s  %(message)s"))
    logger.handlers.clear()
    logger.addHandler(handler)
