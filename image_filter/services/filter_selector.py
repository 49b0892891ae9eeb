"""Выбор фильтра и проверка его параметра.

Принципы:
- SRP: только сопоставление идентификатора фильтра с метаданными и валидация значения.
- Чистый код: неизвестное имя фильтра считается ошибкой вызывающего кода (`UnknownFilterError`),
  выход значения за диапазон даёт просто `False`.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple, Union

from image_filter.errors import UnknownFilterError
from image_filter.models.filters import FilterSpec, ImageFilter, filter_spec

FilterId = Union[ImageFilter, str]


class FilterSelector:
    def from_string(self, name: str) -> ImageFilter:
        """Возвращает фильтр по имени без учёта регистра ("Sepia" -> SEPIA).

        Raises:
            UnknownFilterError: если имя не входит в набор `ImageFilter`.
        """
        try:
            return ImageFilter(str(name).strip().lower())
        except ValueError as exc:
            raise UnknownFilterError(name) from exc

    def available_filters(self) -> List[str]:
        """Подписи фильтров для меню в порядке объявления."""
        return [image_filter.display_name for image_filter in ImageFilter]

    def spec_for(self, filter_id: FilterId) -> FilterSpec:
        return filter_spec(self._resolve(filter_id))

    def requires_parameter(self, filter_id: FilterId) -> bool:
        return self.spec_for(filter_id).requires_parameter

    def validate(self, filter_id: FilterId, value: float) -> bool:
        """Проверяет, что `value` лежит в диапазоне параметра фильтра (включительно).

        Для фильтров без параметра всегда возвращает `False`.
        """
        spec = self.spec_for(filter_id)
        if not spec.requires_parameter or spec.parameter_range is None:
            return False
        low, high = spec.parameter_range
        return low <= value <= high

    def parameters_for(self, filter_id: FilterId, value: float) -> Optional[Dict[str, float]]:
        """Словарь `{имя_параметра: значение}` для рендерера или `None`, если значение не прошло проверку."""
        spec = self.spec_for(filter_id)
        if spec.parameter_name is None or not self.validate(filter_id, value):
            return None
        return {spec.parameter_name: float(value)}

    def alert_values(self, filter_id: FilterId) -> Optional[Tuple[str, str, str]]:
        """Значения для диалога ввода параметра: (min, max, имя параметра)."""
        spec = self.spec_for(filter_id)
        if spec.parameter_range is None or spec.parameter_name is None:
            return None
        low, high = spec.parameter_range
        return str(low), str(high), spec.parameter_name

    def _resolve(self, filter_id: FilterId) -> ImageFilter:
        if isinstance(filter_id, ImageFilter):
            return filter_id
        return self.from_string(filter_id)
