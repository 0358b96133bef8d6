"""Dice state machine definitions.

Defines the three states of the single-button dice and one stateless
handler per state. Each handler narrates its action and moves the
context on to the next state.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from dice_toy.core.context import DiceContext


DEFAULT_DICE_NUMBER = 4


class DiceState(Enum):
    """States of the dice.

    Transitions (every button press):
        POWER_ON → STOP_DICE (dice starts shaking)
        STOP_DICE → POWER_OFF (dice stops, number is set)
        POWER_OFF → POWER_ON (dice switches off)
    """

    POWER_ON = auto()
    STOP_DICE = auto()
    POWER_OFF = auto()


TRANSITIONS: dict[DiceState, DiceState] = {
    DiceState.POWER_ON: DiceState.STOP_DICE,
    DiceState.STOP_DICE: DiceState.POWER_OFF,
    DiceState.POWER_OFF: DiceState.POWER_ON,
}


class State(ABC):
    """Behavior of the dice in one state."""

    @abstractmethod
    def on_press_button(self, context: DiceContext) -> None:
        """Handle a button press and move the context to its next state.

        Args:
            context: The dice context to mutate.
        """
        ...


class StatePowerOn(State):
    def on_press_button(self, context: DiceContext) -> None:
        context.announce("Power on and shake the dice.")
        context.set_state(TRANSITIONS[DiceState.POWER_ON])


class StateStop(State):
    def on_press_button(self, context: DiceContext) -> None:
        context.announce("Stopping the dice.")
        context.set_dice_number(context.dice_number)
        context.set_state(TRANSITIONS[DiceState.STOP_DICE])


class StatePowerOff(State):
    def on_press_button(self, context: DiceContext) -> None:
        context.announce("Power off.")
        context.set_state(TRANSITIONS[DiceState.POWER_OFF])


def build_handlers() -> dict[DiceState, State]:
    """Create the handler table, one instance per dice state.

    Returns:
        Mapping from every DiceState to its handler.
    """
    return {
        DiceState.POWER_ON: StatePowerOn(),
        DiceState.STOP_DICE: StateStop(),
        DiceState.POWER_OFF: StatePowerOff(),
    }


def validate_handlers(handlers: Mapping[DiceState, State]) -> None:
    """Check that every dice state has a registered handler.

    Args:
        handlers: Handler table to check.

    Raises:
        ValueError: If one or more states have no handler.
    """
    missing = [state.name for state in DiceState if state not in handlers]
    if missing:
        raise ValueError(
            f"Handler table is incomplete; no handler for: {', '.join(missing)}"
        )


DEFAULT_HANDLERS: Mapping[DiceState, State] = build_handlers()
