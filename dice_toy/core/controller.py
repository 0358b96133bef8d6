"""Dice controller — drives button presses through the state machine.

Each press moves the dice one step around the cycle
POWER_ON → STOP_DICE → POWER_OFF → POWER_ON and shows the context on
the display afterwards.
"""

from __future__ import annotations

import logging
from typing import Mapping

from dice_toy.core.config import Settings
from dice_toy.core.context import DiceContext, DiceSnapshot
from dice_toy.core.state_machine import DEFAULT_HANDLERS, DiceState, State, validate_handlers
from dice_toy.hardware.interfaces import ButtonInput, DisplayOutput

logger = logging.getLogger(__name__)


class DiceController:
    """Runs the dice's single-button loop.

    Args:
        settings: Application settings.
        button: Hardware button interface.
        display: Optional display output interface.
        handlers: State handler table. Defaults to the built-in handlers.

    Raises:
        ValueError: If the handler table does not cover every state.
    """

    def __init__(
        self,
        settings: Settings,
        button: ButtonInput,
        display: DisplayOutput | None = None,
        handlers: Mapping[DiceState, State] | None = None,
    ) -> None:
        self._handlers = handlers if handlers is not None else DEFAULT_HANDLERS
        validate_handlers(self._handlers)

        self._settings = settings
        self._button = button
        self._display = display
        self._context = DiceContext(dice_number=settings.dice_number, display=display)
        self._history: list[DiceSnapshot] = []

    @property
    def state(self) -> DiceState:
        """Current dice state."""
        return self._context.current_state

    @property
    def number(self) -> int | None:
        """Rolled number, None until the dice has stopped once."""
        return self._context.number

    @property
    def context(self) -> DiceContext:
        return self._context

    @property
    def history(self) -> list[DiceSnapshot]:
        """Snapshots taken after each press, oldest first."""
        return list(self._history)

    def press(self) -> DiceSnapshot:
        """Press the button once.

        Returns:
            Snapshot of the context after the press.
        """
        previous = self._context.current_state
        self._context.press_button(self._handlers)
        logger.info("Button pressed: %s -> %s", previous.name, self._context.current_state.name)

        if self._display:
            self._display.show_text(repr(self._context))

        snapshot = self._context.snapshot()
        self._history.append(snapshot)
        return snapshot

    def run(self) -> list[DiceSnapshot]:
        """Press the button for every press the button reports.

        Returns:
            Snapshots taken during this run, oldest first.
        """
        logger.info("Dice controller started in state %s.", self.state.name)
        snapshots = []
        while self._button.wait_for_press():
            snapshots.append(self.press())
        logger.info(
            "Dice controller stopped after %d press(es) in state %s.",
            len(snapshots),
            self.state.name,
        )
        return snapshots
