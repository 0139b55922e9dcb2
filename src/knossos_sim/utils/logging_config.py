"""Logging configuration for Knossos Sim."""

import logging
import sys

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_FORMATS = {
    "simple": "%(name)s - %(levelname)s - %(message)s",
    "detailed": "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
}


def setup_logging(level: str = "INFO", format_style: str = "simple") -> None:
    """
    Configure the root logger that every game module logs through.

    The first call installs a stdout handler. Later calls only change the
    level, so a game can raise or lower verbosity after import.

    Args:
        level: One of LOG_LEVELS, case-insensitive; unknown names mean INFO
        format_style: "simple" or "detailed"
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format=_FORMATS.get(format_style, _FORMATS["simple"]),
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger().setLevel(numeric_level)


def get_game_logger(module_name: str) -> logging.Logger:
    """
    Get a logger with a shortened name for game modules.

    Args:
        module_name: Full module name (e.g., 'knossos_sim.engine.turn_controller')

    Returns:
        Logger with shortened name (e.g., 'engine.turn_controller')
    """
    if module_name.startswith('knossos_sim.'):
        module_name = module_name[len('knossos_sim.'):]
    return logging.getLogger(module_name)
