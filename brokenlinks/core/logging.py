import logging
from typing import Optional
from rich.logging import RichHandler

_CONFIGURED = False

def setup(level: str = "INFO") -> logging.Logger:
    global _CONFIGURED
    if not _CONFIGURED:
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        )
        _CONFIGURED = True
    else:
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
    # one line per request is far too chatty next to the OK/KO stream
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return logging.getLogger("brokenlinks")

def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "brokenlinks")
