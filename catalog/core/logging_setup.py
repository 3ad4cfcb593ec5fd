import logging
from typing import Optional

from .config import get_settings


def setup_logging(level: Optional[str] = None) -> None:
    """
    Minimal logging setup.
    - Uses LOG_LEVEL from settings if level is None.
    - Configures a single console handler via logging.basicConfig.
    """
    level_name = (level or get_settings().log_level or "INFO").upper()
    # Nome desconhecido cai para INFO
    level_value = getattr(logging, level_name, logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    logging.basicConfig(
        level=level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
