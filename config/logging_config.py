# config/logging_config.py

import logging

from config.settings import LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL) -> None:
    """Configura o logger raiz uma única vez (chamado na subida da API)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
