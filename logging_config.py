import logging


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the root logger for the tracker UI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("tracker")
