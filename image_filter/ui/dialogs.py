"""Модальные окна: изменение размера, ввод параметра фильтра, предупреждение об отсутствии изображения.

Принципы:
- SRP: окна только собирают ввод; расчёты делает `ResizeCalculator`, проверку выполняет контроллер.
- Каждое окно блокирует родителя (`grab_set`) и возвращает результат из `show()`.
"""
from __future__ import annotations

from enum import Enum
from tkinter import messagebox
from typing import Optional, Tuple

import customtkinter as ctk

from image_filter.models.size_model import Size
from image_filter.services.resize_calculator import ResizeCalculator


def parse_dimension(text: str) -> Optional[int]:
    """Целое положительное число из поля ввода или `None`."""
    try:
        value = int(text.strip())
    except ValueError:
        return None
    return value if value > 0 else None


def parse_parameter(text: str) -> Optional[float]:
    try:
        return float(text.strip().replace(",", "."))
    except ValueError:
        return None


class _ModalDialog(ctk.CTkToplevel):
    def __init__(self, master: ctk.CTk, title: str) -> None:
        super().__init__(master)
        self.title(title)
        self.resizable(False, False)
        self.transient(master)
        self.grid_columnconfigure(0, weight=1)
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _run_modal(self) -> None:
        # CTkToplevel is mapped asynchronously; grab only after it is visible
        self.after(50, self._grab)
        self.wait_window()

    def _grab(self) -> None:
        if self.winfo_exists():
            self.grab_set()
            self.focus_force()

    def _on_close(self) -> None:
        self.destroy()


class ResizeDialog(_ModalDialog):
    """Окно «Изменить размер»: ширина/высота, пропорции, пресеты в процентах.

    Поля пересчитываются через `ResizeCalculator` при каждом вводе; вычисленное
    значение подставляется в соседнее поле в усечённом виде.
    """
    def __init__(self, master: ctk.CTk, calculator: ResizeCalculator) -> None:
        super().__init__(master, title="Изменить размер")
        self._calculator = calculator
        self._accepted = False

        self._original_label = ctk.CTkLabel(self, text=calculator.original_size_string, anchor="w")
        self._original_label.grid(row=0, column=0, columnspan=2, padx=12, pady=(12, 8), sticky="w")

        width, height = calculator.edited_size.truncated() if calculator.edited_size else (0, 0)
        self._width_value = ctk.StringVar(value=str(width))
        self._height_value = ctk.StringVar(value=str(height))

        ctk.CTkLabel(self, text="Ширина").grid(row=1, column=0, padx=(12, 6), pady=4, sticky="w")
        self._width_entry = ctk.CTkEntry(self, textvariable=self._width_value, width=100)
        self._width_entry.grid(row=1, column=1, padx=(6, 12), pady=4, sticky="e")

        ctk.CTkLabel(self, text="Высота").grid(row=2, column=0, padx=(12, 6), pady=4, sticky="w")
        self._height_entry = ctk.CTkEntry(self, textvariable=self._height_value, width=100)
        self._height_entry.grid(row=2, column=1, padx=(6, 12), pady=4, sticky="e")

        self._lock_value = ctk.BooleanVar(value=calculator.lock_aspect_ratio)
        self._lock_checkbox = ctk.CTkCheckBox(
            self, text="Сохранять пропорции", variable=self._lock_value, command=self._on_lock_change
        )
        self._lock_checkbox.grid(row=3, column=0, columnspan=2, padx=12, pady=(8, 4), sticky="w")

        ctk.CTkLabel(self, text="Уменьшить до").grid(row=4, column=0, padx=(12, 6), pady=4, sticky="w")
        percentages = calculator.available_percentages
        self._percent_value = ctk.StringVar(value=percentages[0])
        self._percent_menu = ctk.CTkOptionMenu(
            self, values=percentages, variable=self._percent_value, command=self._on_percentage, width=100
        )
        self._percent_menu.grid(row=4, column=1, padx=(6, 12), pady=4, sticky="e")

        buttons = ctk.CTkFrame(self, fg_color="transparent")
        buttons.grid(row=5, column=0, columnspan=2, padx=12, pady=(12, 12), sticky="e")
        ctk.CTkButton(buttons, text="Отмена", width=90, fg_color="transparent", border_width=1,
                      command=self._on_close).grid(row=0, column=0, padx=(0, 6))
        ctk.CTkButton(buttons, text="Изменить", width=90, command=self._on_accept).grid(row=0, column=1)

        self._width_entry.bind("<KeyRelease>", self._on_width_key)
        self._height_entry.bind("<KeyRelease>", self._on_height_key)
        self.bind("<Return>", lambda _event: self._on_accept())
        self.bind("<Escape>", lambda _event: self._on_close())

    def show(self) -> Optional[Size]:
        """Показывает окно и возвращает выбранный размер или `None` при отмене."""
        self._run_modal()
        if not self._accepted:
            return None
        return self._calculator.edited_size

    # ---- Events ----
    def _on_width_key(self, _event: object) -> None:
        width = parse_dimension(self._width_value.get())
        if width is None:
            return
        size = self._calculator.on_width_edited(width)
        if size is not None and self._calculator.lock_aspect_ratio:
            self._height_value.set(str(size.truncated()[1]))

    def _on_height_key(self, _event: object) -> None:
        height = parse_dimension(self._height_value.get())
        if height is None:
            return
        size = self._calculator.on_height_edited(height)
        if size is not None and self._calculator.lock_aspect_ratio:
            self._width_value.set(str(size.truncated()[0]))

    def _on_lock_change(self) -> None:
        self._calculator.lock_aspect_ratio = bool(self._lock_value.get())

    def _on_percentage(self, label: str) -> None:
        # Пресеты всегда сохраняют пропорции: включаем флажок, чтобы UI не противоречил расчёту
        self._lock_value.set(True)
        self._calculator.lock_aspect_ratio = True
        size = self._calculator.resize_by_percentage_label(label)
        if size is None:
            return
        width, height = size.truncated()
        self._width_value.set(str(width))
        self._height_value.set(str(height))

    def _on_accept(self) -> None:
        self._accepted = True
        self.destroy()


class ParameterChoice(str, Enum):
    OK = "ok"
    CANCEL = "cancel"
    USE_DEFAULT = "default"


class FilterParameterDialog(_ModalDialog):
    """Окно ввода параметра фильтра с кнопками OK / Отмена / По умолчанию."""
    def __init__(self, master: ctk.CTk, alert_values: Tuple[str, str, str]) -> None:
        super().__init__(master, title="Применить фильтр")
        min_value, max_value, param_name = alert_values
        self._choice = ParameterChoice.CANCEL
        self._text = ""

        message = f"Введите значение от {min_value} до {max_value} для параметра [{param_name}]:"
        ctk.CTkLabel(self, text=message, wraplength=320, justify="left").grid(
            row=0, column=0, padx=12, pady=(12, 8), sticky="w"
        )

        self._value = ctk.StringVar(value="")
        self._entry = ctk.CTkEntry(self, textvariable=self._value, width=100, justify="center")
        self._entry.grid(row=1, column=0, padx=12, pady=4)

        buttons = ctk.CTkFrame(self, fg_color="transparent")
        buttons.grid(row=2, column=0, padx=12, pady=(12, 12), sticky="e")
        ctk.CTkButton(buttons, text="По умолчанию", width=110, fg_color="transparent", border_width=1,
                      command=lambda: self._finish(ParameterChoice.USE_DEFAULT)).grid(row=0, column=0, padx=(0, 6))
        ctk.CTkButton(buttons, text="Отмена", width=90, fg_color="transparent", border_width=1,
                      command=lambda: self._finish(ParameterChoice.CANCEL)).grid(row=0, column=1, padx=(0, 6))
        ctk.CTkButton(buttons, text="OK", width=90,
                      command=lambda: self._finish(ParameterChoice.OK)).grid(row=0, column=2)

        self.bind("<Return>", lambda _event: self._finish(ParameterChoice.OK))
        self.bind("<Escape>", lambda _event: self._finish(ParameterChoice.CANCEL))

    def show(self) -> Tuple[ParameterChoice, Optional[float]]:
        """Возвращает нажатую кнопку и введённое значение (`None`, если не число)."""
        self.after(100, self._entry.focus_set)
        self._run_modal()
        return self._choice, parse_parameter(self._text)

    def _finish(self, choice: ParameterChoice) -> None:
        self._choice = choice
        self._text = self._value.get()
        self.destroy()


class MissingImageAlert(_ModalDialog):
    """Предупреждение «Нет изображения» с флажком «больше не показывать»."""
    def __init__(self, master: ctk.CTk) -> None:
        super().__init__(master, title="Нет изображения")
        ctk.CTkLabel(self, text="Нет изображения, к которому можно применить фильтр.",
                     wraplength=320, justify="left").grid(row=0, column=0, padx=12, pady=(12, 8), sticky="w")

        self._suppress = ctk.BooleanVar(value=False)
        ctk.CTkCheckBox(self, text="Понятно, больше не показывать это сообщение", variable=self._suppress).grid(
            row=1, column=0, padx=12, pady=4, sticky="w"
        )
        ctk.CTkButton(self, text="OK", width=90, command=self._on_close).grid(
            row=2, column=0, padx=12, pady=(12, 12), sticky="e"
        )

    def show(self) -> bool:
        """Возвращает `True`, если пользователь отключил предупреждение."""
        self._run_modal()
        return bool(self._suppress.get())


def show_error(master: ctk.CTk, title: str, message: str) -> None:
    messagebox.showerror(title, message, parent=master)


__all__ = [
    "FilterParameterDialog",
    "MissingImageAlert",
    "ParameterChoice",
    "ResizeDialog",
    "parse_dimension",
    "parse_parameter",
    "show_error",
]
