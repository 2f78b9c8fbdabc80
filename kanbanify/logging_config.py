import logging
from typing import Optional

from kanbanify.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger once for the server and the CLI."""
    resolved = (level or settings.LOG_LEVEL or "INFO").upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("kanbanify").setLevel(resolved)
    # SQL echo is far too chatty outside of debugging sessions
    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.DEBUG else logging.WARNING)
