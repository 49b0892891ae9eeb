"""Настройки приложения.

Все значения по умолчанию заданы в коде; переменные окружения позволяют
переопределить уровень логирования и тему без правки исходников.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Tuple

ENV_LOG_LEVEL = "IMAGE_FILTER_LOG_LEVEL"
ENV_APPEARANCE = "IMAGE_FILTER_APPEARANCE"

_APPEARANCE_MODES = ("system", "light", "dark")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppSettings:
    """Неизменяемые настройки окна, диалогов и логирования.

    Fields:
        title: Заголовок главного окна.
        min_size: Минимальный размер окна (ширина, высота), px.
        appearance_mode: Режим оформления customtkinter: "system" | "light" | "dark".
        color_theme: Встроенная цветовая тема customtkinter.
        supported_formats: Расширения, доступные в диалоге открытия.
        log_level: Имя уровня логирования.
    """
    title: str = "Image Filter"
    min_size: Tuple[int, int] = (900, 600)
    appearance_mode: str = "system"
    color_theme: str = "blue"
    supported_formats: Tuple[str, ...] = field(default=("png", "jpg", "jpeg"))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> AppSettings:
        """Строит настройки по умолчанию с учётом переменных окружения."""
        env = os.environ if environ is None else environ
        settings = cls()

        level = env.get(ENV_LOG_LEVEL, "").strip().upper()
        if level in _LOG_LEVELS:
            settings = replace(settings, log_level=level)

        appearance = env.get(ENV_APPEARANCE, "").strip().lower()
        if appearance in _APPEARANCE_MODES:
            settings = replace(settings, appearance_mode=appearance)
        return settings

    @property
    def open_dialog_filetypes(self) -> Tuple[Tuple[str, str], ...]:
        """Фильтры для `filedialog.askopenfilename`."""
        patterns = " ".join(f"*.{ext}" for ext in self.supported_formats)
        return (("Images", patterns), ("All files", "*.*"))
