from __future__ import annotations

import logging
import tkinter as tk

from tkinter import ttk

from ..config import Settings
from ..password_generator import GeneratedPassword, GenerationRequest, PasswordGenerator
from .frames import GeneratorFrame

logger = logging.getLogger(__name__)


class PasswordGeneratorApp(tk.Tk):
    """
    Top-level Tkinter application for the password generator.

    This GUI is a thin layer over PasswordGenerator; all generation and
    scoring happens in the core package.
    """

    WINDOW_WIDTH = 420
    WINDOW_HEIGHT = 360

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()

        self.settings = settings or Settings.from_env()
        self.generator = PasswordGenerator()

        self.title('Password Generator')
        self.geometry(f'{self.WINDOW_WIDTH}x{self.WINDOW_HEIGHT}')
        self.minsize(self.WINDOW_WIDTH, self.WINDOW_HEIGHT)

        container = ttk.Frame(self)
        container.pack(fill='both', expand=True)
        container.rowconfigure(0, weight=1)
        container.columnconfigure(0, weight=1)

        self.frame = GeneratorFrame(parent=container, controller=self)
        self.frame.grid(row=0, column=0, sticky='nsew')

    def generate(self, request: GenerationRequest) -> GeneratedPassword:
        """Called by GeneratorFrame when the user asks for a password."""
        password = self.generator.generate(request)
        logger.debug('GUI generated a %d character password', password.length)
        return password


def main() -> None:
    """Entry point for launching the Tkinter GUI."""
    settings = Settings.from_env()
    logging.basicConfig(level=settings.log_level)

    app = PasswordGeneratorApp(settings)
    app.mainloop()


if __name__ == '__main__':
    main()
