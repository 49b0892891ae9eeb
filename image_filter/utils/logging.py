"""Логирование приложения: один именованный логгер на весь процесс."""
from __future__ import annotations

import logging
from typing import Optional

_LOGGER: Optional[logging.Logger] = None


def get_logger(level: int | str | None = None) -> logging.Logger:
    """Возвращает логгер ``image_filter`` (создаёт и настраивает при первом вызове).

    Args:
        level: Необязательный уровень логирования; применяется при каждом вызове,
            если передан.
    """
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger("image_filter")
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            handler.setFormatter(formatter)
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    if level is not None:
        _LOGGER.setLevel(level)
    return _LOGGER


logger = get_logger()
