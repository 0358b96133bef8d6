"""Dice context — the current state plus the rolled number."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from dice_toy.core.state_machine import (
    DEFAULT_DICE_NUMBER,
    DEFAULT_HANDLERS,
    DiceState,
    State,
)
from dice_toy.hardware.interfaces import DisplayOutput

logger = logging.getLogger(__name__)

DICE_FACES = range(1, 7)


class UnregisteredStateError(LookupError):
    """Raised when the current state has no handler in the table."""


@dataclass(frozen=True)
class DiceSnapshot:
    """Point-in-time copy of a DiceContext.

    Attributes:
        current_state: State after the press.
        number: Rolled number, or None if the dice has not stopped yet.
    """

    current_state: DiceState
    number: int | None


class DiceContext:
    """Holds the dice's current state and delegates presses to its handler.

    Args:
        dice_number: Number the dice lands on when it stops.
        display: Optional display that receives the narration.

    Raises:
        ValueError: If dice_number is not a face of a six-sided dice.
    """

    def __init__(
        self,
        dice_number: int = DEFAULT_DICE_NUMBER,
        display: DisplayOutput | None = None,
    ) -> None:
        if dice_number not in DICE_FACES:
            raise ValueError(f"Dice number must be between 1 and 6, got {dice_number}")
        self.dice_number = dice_number
        self._display = display
        self.number: int | None = None
        self.current_state = DiceState.POWER_ON

    def set_state(self, state: DiceState) -> None:
        self.current_state = state

    def set_dice_number(self, number: int) -> None:
        """Set the rolled number.

        Raises:
            ValueError: If the number is not a face of a six-sided dice.
        """
        if number not in DICE_FACES:
            raise ValueError(f"Dice number must be between 1 and 6, got {number}")
        self.number = number

    def announce(self, message: str) -> None:
        """Narrate a state action on the display."""
        logger.debug("%s: %s", self.current_state.name, message)
        if self._display:
            self._display.show_text(message)

    def press_button(self, handlers: Mapping[DiceState, State] = DEFAULT_HANDLERS) -> None:
        """Dispatch a button press to the handler for the current state.

        Args:
            handlers: Handler table keyed by dice state.

        Raises:
            UnregisteredStateError: If the current state has no handler.
        """
        try:
            handler = handlers[self.current_state]
        except KeyError:
            raise UnregisteredStateError(
                f"No handler registered for state {self.current_state.name}"
            ) from None
        handler.on_press_button(self)

    def snapshot(self) -> DiceSnapshot:
        return DiceSnapshot(current_state=self.current_state, number=self.number)

    def __repr__(self) -> str:
        return (
            f"DiceContext(number={self.number!r}, "
            f"current_state={self.current_state.name})"
        )
