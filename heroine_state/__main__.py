"""Run the heroine: ``python -m heroine_state``."""

import sys

import structlog

from .config.defaults import get_default_config
from .config.loader import ConfigLoader
from .engine import TickLoop
from .errors import ConfigurationError
from .logging.config import configure_logging

logger = structlog.get_logger(__name__)


def main() -> int:
    """Load configuration and tick the heroine until a shutdown signal arrives."""
    try:
        config = ConfigLoader.create().load_config()
    except ConfigurationError as e:
        configure_logging(level=get_default_config().logging.level)
        logger.error(
            "Invalid configuration",
            error=str(e),
            source=e.source,
            errors=[f"{err.field}: {err.message} (got: {err.value})" for err in e.errors]
        )
        return 1

    configure_logging(level=config.logging.level, format_json=config.logging.format_json)

    loop = TickLoop.from_config(config)
    loop.install_signal_handlers()
    loop.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
