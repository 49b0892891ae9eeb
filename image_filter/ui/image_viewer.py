"""Виджет просмотра изображения: вписывание в доступную область по центру.

Принципы:
- SRP: отвечает только за отображение; байты декодирует контроллер/сервис.
"""
from __future__ import annotations

from typing import Optional

import customtkinter as ctk
import tkinter as tk
from PIL import Image, ImageTk


class ImageViewer(ctk.CTkFrame):
    """Канва, показывающая одно изображение, уменьшенное под размер окна (без увеличения)."""
    def __init__(self, master: ctk.CTk | tk.Misc, **kwargs) -> None:
        super().__init__(master, **kwargs)
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(0, weight=1)

        self._canvas = tk.Canvas(self, highlightthickness=0, bg=self._get_canvas_bg())
        self._canvas.grid(row=0, column=0, sticky="nsew")

        self._image: Optional[Image.Image] = None
        self._tk_image: Optional[ImageTk.PhotoImage] = None

        self._canvas.bind("<Configure>", self._on_canvas_resize)

    # ---- Public API ----
    def set_image(self, image: Optional[Image.Image]) -> None:
        """Показывает изображение (или очищает канву при `None`)."""
        self._image = image
        self._render_image()

    def clear(self) -> None:
        self.set_image(None)

    # ---- Internals ----
    def _on_canvas_resize(self, _event: tk.Event) -> None:
        if self._image is not None:
            self._render_image()

    def _render_image(self) -> None:
        self._canvas.delete("all")
        self._tk_image = None
        if self._image is None:
            return

        canvas_w = max(1, int(self._canvas.winfo_width()))
        canvas_h = max(1, int(self._canvas.winfo_height()))
        img_w, img_h = self._image.size
        if img_w == 0 or img_h == 0:
            return

        scale = min(1.0, canvas_w / img_w, canvas_h / img_h)
        scaled_w = max(1, int(img_w * scale))
        scaled_h = max(1, int(img_h * scale))
        draw_img = self._image
        if (scaled_w, scaled_h) != (img_w, img_h):
            draw_img = self._image.resize((scaled_w, scaled_h), Image.Resampling.LANCZOS)

        x = (canvas_w - scaled_w) // 2
        y = (canvas_h - scaled_h) // 2
        self._tk_image = ImageTk.PhotoImage(draw_img)
        self._canvas.create_image(x, y, image=self._tk_image, anchor="nw")

    def _get_canvas_bg(self) -> str:
        # CTk does not expose canvas theme, so pick neutral
        return "#1f1f1f" if ctk.get_appearance_mode().lower() == "dark" else "#f2f2f2"
