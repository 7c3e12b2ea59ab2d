import logging
from typing import Optional
from rich.logging import RichHandler

_CONFIGURED = False

def setup(level: str = "INFO") -> logging.Logger:
    global _CONFIGURED
    resolved = getattr(logging, level.upper(), logging.INFO)
    if not _CONFIGURED:
        logging.basicConfig(
            level=resolved,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        )
        _CONFIGURED = True
    logger = logging.getLogger("assertdocs")
    logger.setLevel(resolved)
    return logger

def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not _CONFIGURED:
        setup()
    return logging.getLogger(name or "assertdocs")
