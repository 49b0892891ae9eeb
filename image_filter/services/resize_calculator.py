"""Калькулятор нового размера изображения с сохранением пропорций.

Принципы:
- SRP: только арифметика размеров; рендеринг выполняет `ImageService.resize`.
- Чистый код: вычисленные значения возвращаются явно, без колбэков в UI.
  Если предусловия не выполнены (нет исходного размера, деление на нулевую сторону
  при сохранении пропорций), методы ничего не меняют и возвращают `None`.
"""
from __future__ import annotations

from typing import List, Optional, Tuple

from image_filter.models.size_model import Size, SizeModel
from image_filter.utils.logging import logger

RESIZE_PERCENTAGES: Tuple[int, ...] = (100, 75, 60, 50, 25, 10)


class ResizeCalculator:
    """Сессия изменения размера: исходный размер, целевой размер и флаг пропорций."""

    def __init__(self, lock_aspect_ratio: bool = True) -> None:
        self._model = SizeModel()
        self.lock_aspect_ratio = lock_aspect_ratio

    # ---- State ----
    @property
    def original_size(self) -> Optional[Size]:
        return self._model.original_size

    @property
    def edited_size(self) -> Optional[Size]:
        return self._model.edited_size

    @property
    def original_size_string(self) -> str:
        original = self._model.original_size
        if original is None:
            return "Original Image Size: -"
        return f"Original Image Size: {original.display()}"

    @property
    def available_percentages(self) -> List[str]:
        """Подписи пресетов уменьшения для меню ("100%", "75%", ...)."""
        return [f"{percentage}%" for percentage in RESIZE_PERCENTAGES]

    def set_original(self, size: Size) -> None:
        """Начинает новую сессию: запоминает исходный размер, целевой = исходный."""
        self._model.original_size = size
        self._model.edited_size = size

    def reset(self) -> None:
        self._model = SizeModel()

    # ---- Edits ----
    def on_width_edited(self, width: float) -> Optional[Size]:
        """Пользователь изменил ширину.

        При сохранении пропорций пересчитывает высоту по исходному соотношению,
        иначе меняет только ширину.

        Returns:
            Новый целевой размер или `None`, если пересчёт невозможен.
        """
        original = self._checked_original()
        if original is None:
            return None
        if not self.lock_aspect_ratio:
            size = (self._model.edited_size or original).with_width(width)
        elif self._has_ratio(original, original.width, original.height):
            size = Size(width, width * original.height / original.width)
        else:
            return None
        self._model.edited_size = size
        return size

    def on_height_edited(self, height: float) -> Optional[Size]:
        """Пользователь изменил высоту; зеркально `on_width_edited`."""
        original = self._checked_original()
        if original is None:
            return None
        if not self.lock_aspect_ratio:
            size = (self._model.edited_size or original).with_height(height)
        elif self._has_ratio(original, original.height):
            size = Size(height * original.width / original.height, height)
        else:
            return None
        self._model.edited_size = size
        return size

    def resize_by_percentage(self, percentage: int) -> Optional[Size]:
        """Размер от исходного по пресету из `RESIZE_PERCENTAGES`.

        Пропорции сохраняются всегда, независимо от `lock_aspect_ratio`;
        сам флаг не меняется.
        """
        if percentage not in RESIZE_PERCENTAGES:
            logger.debug("Unsupported resize percentage: %s", percentage)
            return None
        original = self._checked_original()
        if original is None or not self._has_ratio(original, original.width, original.height):
            return None
        width = original.width * percentage / 100
        size = Size(width, width * original.height / original.width)
        self._model.edited_size = size
        return size

    def resize_by_percentage_label(self, label: str) -> Optional[Size]:
        """То же, что `resize_by_percentage`, но по подписи из меню ("25%")."""
        try:
            percentage = int(label.strip().rstrip("%"))
        except ValueError:
            return None
        return self.resize_by_percentage(percentage)

    # ---- Helpers ----
    def _checked_original(self) -> Optional[Size]:
        original = self._model.original_size
        if original is None:
            logger.debug("Resize requested before the original size was set")
        return original

    @staticmethod
    def _has_ratio(original: Size, *divisors: float) -> bool:
        # the locked formulas divide by these sides of the original
        if any(side == 0 for side in divisors):
            logger.debug("Original size %s has no usable aspect ratio", original.display())
            return False
        return True
