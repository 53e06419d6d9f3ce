"""
Logging setup for the CLI and the server.

Modules log through `logging.getLogger(__name__)`:
- unscramble.engine_core.game: round starts, game over, rejected commands
  (INFO) and each picked word (DEBUG)
- unscramble.engine_core.observable: subscriber exceptions
- unscramble.session.manager: session lifecycle
- unscramble.words: corpus loading
- unscramble.api: unmapped command errors and WebSocket disconnects

Only entry points call configure_logging(); importing the package
never touches the root logger.
"""

import logging
import os

LOG_LEVEL_ENV = "UNSCRAMBLE_LOG_LEVEL"
LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def configure_logging(default_level: int = logging.INFO) -> None:
    """Configure the root logger, honouring UNSCRAMBLE_LOG_LEVEL.

    Unknown level names fall back to default_level.
    """
    level_name = os.getenv(LOG_LEVEL_ENV)
    level = default_level
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)
    logging.basicConfig(level=level, format=LOG_FORMAT)
