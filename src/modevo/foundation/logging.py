from __future__ import annotations

import logging

LOGGER_NAME = "modevo"
DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_modevo_logging(*, level: int | str = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """
    Attach a console handler to the ``modevo`` logger and return it.

    Notes:
        - Opt-in only; library modules never call logging.basicConfig().
        - Nothing is attached when the root logger or the ``modevo`` logger already
          has handlers, so applications that configure logging keep full control.
          The level is still applied in that case.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level!r}")

    root = logging.getLogger()
    modevo_logger = logging.getLogger(LOGGER_NAME)
    modevo_logger.setLevel(level)

    if root.handlers or modevo_logger.handlers:
        return modevo_logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt))
    modevo_logger.addHandler(handler)
    modevo_logger.propagate = False
    return modevo_logger


__all__ = ["configure_modevo_logging", "LOGGER_NAME"]
