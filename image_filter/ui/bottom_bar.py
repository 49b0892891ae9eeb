from __future__ import annotations

import customtkinter as ctk


class BottomBar(ctk.CTkFrame):
    """Строка состояния: имя файла, размер и сообщение о последнем действии."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, height=36, **kwargs)

        # layout
        self.grid_rowconfigure(0, weight=1)
        self.grid_columnconfigure(2, weight=1)  # message stretches

        self._name_value = ctk.StringVar(value="")
        self._size_value = ctk.StringVar(value="")
        self._message_value = ctk.StringVar(value="")

        self._name_label = ctk.CTkLabel(self, textvariable=self._name_value, anchor="w")
        self._name_label.grid(row=0, column=0, padx=(10, 6), pady=6, sticky="w")

        self._size_label = ctk.CTkLabel(self, textvariable=self._size_value, anchor="w")
        self._size_label.grid(row=0, column=1, padx=6, pady=6, sticky="w")

        self._message_label = ctk.CTkLabel(self, textvariable=self._message_value, anchor="e")
        self._message_label.grid(row=0, column=2, padx=(6, 10), pady=6, sticky="e")

        self._progress = ctk.CTkProgressBar(self, mode="indeterminate", width=120)
        self._progress.grid(row=0, column=3, padx=(0, 10), pady=6, sticky="e")
        self._progress.grid_remove()

    # ---- Public API ----
    def set_image(self, name: str, size_text: str) -> None:
        self._name_value.set(name)
        self._size_value.set(size_text)

    def set_message(self, message: str) -> None:
        self._message_value.set(message)

    def set_busy(self, busy: bool) -> None:
        """Показывает/прячет индикатор фоновой операции."""
        if busy:
            self._progress.grid()
            self._progress.start()
        else:
            self._progress.stop()
            self._progress.grid_remove()

    def clear(self) -> None:
        self.set_image("", "")
        self.set_message("")
