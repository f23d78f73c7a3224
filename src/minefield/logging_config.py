"""Logging configuration for minefield."""
import logging
import sys


FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": (
        "%(asctime)s - %(name)s - %(levelname)s - "
        "%(filename)s:%(lineno)d - %(message)s"
    ),
}


def setup_logging(level: str = "WARNING", format_style: str = "simple") -> None:
    """
    Set up logging for the whole application.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...).
        format_style: "simple" or "detailed".
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    log_format = FORMATS.get(format_style, FORMATS["simple"])

    logging.basicConfig(
        level=numeric_level,
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a module, without the package prefix.

    Args:
        name: Module name, usually __name__.
    """
    if name == "minefield":
        return logging.getLogger(name)
    if name.startswith("minefield."):
        name = name[len("minefield."):]
    return logging.getLogger(f"minefield.{name}")
