"""Colored one-line status output for batch runs."""

from __future__ import annotations

GREEN = "\x1b[32m"
RED = "\x1b[31m"
YELLOW = "\x1b[33m"
CYAN = "\x1b[36m"
RESET = "\x1b[0m"


class Console:
    """Print status lines; `color=False` emits plain text (e.g. when piped)."""

    def __init__(self, color: bool = True) -> None:
        self.color = bool(color)

    def _paint(self, code: str, text: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{RESET}"

    def info(self, message: str) -> None:
        print(message, flush=True)

    def step(self, message: str) -> None:
        print(self._paint(CYAN, message), flush=True)

    def success(self, message: str) -> None:
        print(self._paint(GREEN, f"✔ {message}"), flush=True)

    def warning(self, message: str) -> None:
        print(self._paint(YELLOW, f"Warning: {message}"), flush=True)

    def error(self, message: str) -> None:
        print(self._paint(RED, f"✘ {message}"), flush=True)
