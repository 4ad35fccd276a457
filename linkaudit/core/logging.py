import logging
from rich.logging import RichHandler

_CONFIGURED = False

def setup(level: str = "INFO") -> logging.Logger:
    global _CONFIGURED
    if not _CONFIGURED:
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(rich_tracebacks=True, markup=False)],
        )
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)
        _CONFIGURED = True
    else:
        logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))
    return logging.getLogger("linkaudit")
