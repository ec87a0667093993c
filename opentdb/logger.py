# opentdb/logger.py
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    root = logging.getLogger("opentdb")
    root.setLevel(level)
    # avoid duplicate handlers if called twice
    if not any(getattr(h, "_opentdb_console", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler._opentdb_console = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root
