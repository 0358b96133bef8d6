"""Abstract hardware interfaces for the electronic dice.

The dice has exactly one button and one small display. All dice code that
waits for presses or shows output goes through these interfaces so it can
run on a desktop with the stubs in dice_toy/hardware/stubs.py.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ButtonInput(ABC):
    """Abstract single push button."""

    @abstractmethod
    def wait_for_press(self) -> bool:
        """Block until the button is pressed.

        Returns:
            True for a press, False when no further presses will come.
        """
        ...


class DisplayOutput(ABC):
    """Abstract dice display."""

    @abstractmethod
    def show_text(self, text: str) -> None:
        """Display a line of text.

        Args:
            text: Text content to display.
        """
        ...
