from __future__ import annotations

import logging

logger = logging.getLogger("agent_chat.server")


def configure_logging() -> None:
    """Send agent_chat.server records to stderr at INFO and quiet the HTTP client loggers."""
    if logger.handlers:
        return

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
