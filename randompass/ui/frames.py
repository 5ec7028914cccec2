from __future__ import annotations

import tkinter as tk

from tkinter import messagebox, ttk
from typing import TYPE_CHECKING

from ..entropy import strength_label
from ..password_generator import GeneratedPassword, GenerationRequest

if TYPE_CHECKING:
    from .app import PasswordGeneratorApp


class GeneratorFrame(ttk.Frame):
    """Class checkboxes, a length spinbox and the generated result."""

    def __init__(self, parent: tk.Widget, controller: PasswordGeneratorApp) -> None:
        super().__init__(parent)
        self.controller = controller

        ttk.Label(
            self,
            text='Password Generator',
            font=('TkDefaultFont', 14),
        ).pack(pady=10)

        self._upper_var = tk.BooleanVar(value=True)
        self._lower_var = tk.BooleanVar(value=True)
        self._digits_var = tk.BooleanVar(value=True)
        self._special_var = tk.BooleanVar(value=True)
        self._length_var = tk.StringVar(value=str(controller.settings.default_length))
        self._result_var = tk.StringVar()
        self._strength_var = tk.StringVar()

        options = ttk.Frame(self)
        options.pack(fill='x', padx=20)
        for text, var in (
            ('Uppercase (A-Z)', self._upper_var),
            ('Lowercase (a-z)', self._lower_var),
            ('Digits (0-9)', self._digits_var),
            ('Special symbols', self._special_var),
        ):
            ttk.Checkbutton(options, text=text, variable=var).pack(anchor='w')

        length_row = ttk.Frame(self)
        length_row.pack(fill='x', padx=20, pady=5)
        ttk.Label(length_row, text='Length:').pack(side='left')
        ttk.Spinbox(
            length_row,
            from_=0,
            to=controller.settings.max_length,
            textvariable=self._length_var,
            width=6,
        ).pack(side='left', padx=5)

        ttk.Button(self, text='Generate', command=self._on_generate).pack(pady=10)

        ttk.Entry(self, textvariable=self._result_var, state='readonly').pack(
            fill='x',
            padx=20,
            pady=5,
        )
        ttk.Label(self, textvariable=self._strength_var).pack(pady=5)

    def _read_length(self) -> int | None:
        """Return the spinbox value, or None after reporting an invalid one."""
        raw = self._length_var.get().strip()
        max_length = self.controller.settings.max_length
        length = self.controller.settings.parse_length(raw)

        if length is None:
            messagebox.showerror(
                'Error',
                f'Length must be a whole number between 0 and {max_length}.',
            )
            return None
        return length

    def _on_generate(self) -> None:
        """Build a request from the widgets and ask the controller for a password."""
        length = self._read_length()
        if length is None:
            return

        request = GenerationRequest(
            use_upper=self._upper_var.get(),
            use_lower=self._lower_var.get(),
            use_digits=self._digits_var.get(),
            use_special=self._special_var.get(),
            length=length,
        )
        self.show_result(self.controller.generate(request))

    def show_result(self, password: GeneratedPassword) -> None:
        """Display a generated password and its strength."""
        if password.is_empty:
            self._result_var.set('')
            self._strength_var.set('Password is empty')
            return

        self._result_var.set(password.password)
        self._strength_var.set(
            f'Entropy: {password.entropy:.1f} bits ({strength_label(password.entropy)})',
        )
