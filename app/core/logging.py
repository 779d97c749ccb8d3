import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "INFO") -> None:
    """Set up the root logger once for the API process and the scripts."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # engine echo is driven by SQL_ECHO, keep the default logger quiet
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
