"""Закрытый набор фильтров и их статические метаданные.

Принципы:
- OCP: новый фильтр добавляется одной строкой в `ImageFilter` и записью в `_FILTER_SPECS`.
- Чистый код: метаданные неизменяемы (`frozen=True`), поиск по имени только через `from_string`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class ImageFilter(str, Enum):
    NONE = "none"
    SEPIA = "sepia"
    MONO = "mono"
    BLUR = "blur"
    COMIC = "comic"

    @property
    def display_name(self) -> str:
        """Подпись для меню: первая буква заглавная ("Sepia")."""
        return self.value.capitalize()


@dataclass(frozen=True)
class FilterSpec:
    """Описание параметра фильтра.

    Fields:
        requires_parameter: Нужно ли запрашивать значение у пользователя.
        parameter_range: Допустимый диапазон (min, max), включительно.
        parameter_name: Имя параметра для рендерера.
        default_value: Значение «по умолчанию» (кнопка «Use default value», рендер без параметров);
            может лежать вне `parameter_range`, диапазон ограничивает только ввод пользователя.
    """
    requires_parameter: bool = False
    parameter_range: Optional[Tuple[float, float]] = None
    parameter_name: Optional[str] = None
    default_value: Optional[float] = None

    def __post_init__(self) -> None:
        has_meta = self.parameter_range is not None and self.parameter_name is not None
        if self.requires_parameter != has_meta:
            raise ValueError("parameter_range и parameter_name задаются только вместе с requires_parameter")


_NO_PARAMETER = FilterSpec()

_FILTER_SPECS: Dict[ImageFilter, FilterSpec] = {
    ImageFilter.NONE: _NO_PARAMETER,
    ImageFilter.SEPIA: FilterSpec(
        requires_parameter=True,
        parameter_range=(0.0, 0.1),
        parameter_name="intensity",
        default_value=1.0,
    ),
    ImageFilter.MONO: _NO_PARAMETER,
    ImageFilter.BLUR: FilterSpec(
        requires_parameter=True,
        parameter_range=(0.0, 100.0),
        parameter_name="radius",
        default_value=8.0,
    ),
    ImageFilter.COMIC: _NO_PARAMETER,
}


def filter_spec(image_filter: ImageFilter) -> FilterSpec:
    return _FILTER_SPECS[image_filter]


@dataclass
class AppliedFilterState:
    """Выбор пользователя: активный фильтр и флаг сохранения пропорций."""
    selected_filter: ImageFilter = ImageFilter.NONE
    lock_aspect_ratio: bool = True
