"""Utility helpers for Knossos Sim."""

from .logging_config import LOG_LEVELS, setup_logging, get_game_logger

__all__ = ["LOG_LEVELS", "setup_logging", "get_game_logger"]
