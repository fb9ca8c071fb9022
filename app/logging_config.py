# =============================================================================
# Logging Setup
# =============================================================================
# Modules log through `logging.getLogger(__name__)`; this only sets the root
# level and format once, when the app is built. `basicConfig` is a no-op for
# the handler if the host (uvicorn, pytest) already installed one.
# =============================================================================

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the service."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(level.upper())
    # aiosqlite logs every cursor operation at DEBUG
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
