import logging

from rich.console import Console
from rich.logging import RichHandler

from theme_tools.settings import get_log_level


def configure_logging(level: str | None = None) -> None:
    """Route ``theme_tools`` log records to stderr through rich."""
    resolved = level or get_log_level()
    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
    logger = logging.getLogger("theme_tools")
    logger.handlers[:] = [handler]
    logger.setLevel(resolved)
    logger.propagate = False
