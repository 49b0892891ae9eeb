"""Боковая панель: файл, фильтр, изменение размера, информация об изображении.

Принципы:
- SRP: управляет только UI, не содержит логики фильтров и размеров.
- ISP: события наружу через `on_*`, состояние внутрь через компактные `set_*`.
"""
from __future__ import annotations

from typing import Callable, Optional, Sequence

import customtkinter as ctk


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: файл, фильтр, размер, информация."""
    def __init__(self, master: ctk.CTk, filters: Sequence[str], **kwargs) -> None:
        super().__init__(master, width=260, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_open_file: Optional[Callable[[], None]] = None
        self.on_save_file: Optional[Callable[[], None]] = None
        self.on_clear_image: Optional[Callable[[], None]] = None
        self.on_filter_change: Optional[Callable[[str], None]] = None
        self.on_resize: Optional[Callable[[], None]] = None

        self._filters = list(filters)

        # File section
        self._title = ctk.CTkLabel(self, text="Файл", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._open_btn = ctk.CTkButton(self, text="Открыть изображение…", command=self._emit_open_file)
        self._open_btn.grid(row=1, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._save_btn = ctk.CTkButton(self, text="Сохранить как…", command=self._emit_save_file)
        self._save_btn.grid(row=2, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._clear_btn = ctk.CTkButton(
            self, text="Закрыть изображение", fg_color="transparent", border_width=1, command=self._emit_clear
        )
        self._clear_btn.grid(row=3, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Filter section
        self._filter_title = ctk.CTkLabel(self, text="Фильтр", font=ctk.CTkFont(size=16, weight="bold"))
        self._filter_title.grid(row=4, column=0, padx=8, pady=(8, 4), sticky="w")

        self._filter_value = ctk.StringVar(value=self._filters[0] if self._filters else "")
        self._filter_menu = ctk.CTkOptionMenu(
            self, values=self._filters, variable=self._filter_value, command=self._emit_filter_change
        )
        self._filter_menu.grid(row=5, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Resize section
        self._resize_title = ctk.CTkLabel(self, text="Размер", font=ctk.CTkFont(size=16, weight="bold"))
        self._resize_title.grid(row=6, column=0, padx=8, pady=(8, 4), sticky="w")

        self._resize_btn = ctk.CTkButton(self, text="Изменить размер…", command=self._emit_resize)
        self._resize_btn.grid(row=7, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=8, column=0, padx=8, pady=(8, 4), sticky="w")

        self._name_val = ctk.StringVar(value="—")
        self._dims_val = ctk.StringVar(value="—")

        self._info_name = ctk.CTkLabel(self, textvariable=self._name_val, wraplength=230, anchor="w", justify="left")
        self._info_dims = ctk.CTkLabel(self, textvariable=self._dims_val, anchor="w", justify="left")

        self._info_name.grid(row=9, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_dims.grid(row=10, column=0, padx=8, pady=(0, 10), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

        self.set_image_actions_enabled(False)

    # ---- Public API ----
    def set_image_info(self, name: Optional[str], size_text: str) -> None:
        """Отображает имя файла и размер ("W x H px")."""
        self._name_val.set(name or "—")
        self._dims_val.set(f"{size_text} px" if size_text else "—")

    def clear_image_info(self) -> None:
        self.set_image_info(None, "")

    def set_filter_value(self, name: str) -> None:
        """Выставляет пункт меню фильтров без генерации события."""
        self._filter_value.set(name)

    def reset_filter(self) -> None:
        if self._filters:
            self.set_filter_value(self._filters[0])

    def set_image_actions_enabled(self, enabled: bool) -> None:
        """Сохранение, закрытие и изменение размера доступны только при открытом изображении."""
        state = "normal" if enabled else "disabled"
        for button in (self._save_btn, self._clear_btn, self._resize_btn):
            button.configure(state=state)

    # ---- Events ----
    def _emit_open_file(self) -> None:
        if self.on_open_file:
            self.on_open_file()

    def _emit_save_file(self) -> None:
        if self.on_save_file:
            self.on_save_file()

    def _emit_clear(self) -> None:
        if self.on_clear_image:
            self.on_clear_image()

    def _emit_filter_change(self, value: str) -> None:
        if self.on_filter_change:
            self.on_filter_change(value)

    def _emit_resize(self) -> None:
        if self.on_resize:
            self.on_resize()
