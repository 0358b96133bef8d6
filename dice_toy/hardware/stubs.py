"""Desktop stub implementations for hardware interfaces.

These stubs let the dice run without real hardware:
- StubButtonInput: presses the button a fixed number of times
- KeyboardButtonInput: one press per line typed on a text stream
- StubDisplayOutput: prints to a text stream (stdout by default)
"""

from __future__ import annotations

import sys
from typing import TextIO

from dice_toy.hardware.interfaces import ButtonInput, DisplayOutput


class StubButtonInput(ButtonInput):
    """Scripted button that reports a fixed number of presses.

    Args:
        presses: Number of presses before input ends.
    """

    def __init__(self, presses: int = 3) -> None:
        if presses < 0:
            raise ValueError(f"presses must be non-negative, got {presses}")
        self._remaining = presses

    def wait_for_press(self) -> bool:
        """Return True until the scripted presses run out."""
        if self._remaining <= 0:
            return False
        self._remaining -= 1
        return True

    @property
    def remaining(self) -> int:
        return self._remaining


class KeyboardButtonInput(ButtonInput):
    """Treats every line read from a stream as a button press.

    End of stream, or a line reading "q", ends input.

    Args:
        stream: Text stream to read from. Defaults to stdin.
        prompt: Prompt written before each read, if any.
        out: Stream the prompt is written to. Defaults to stdout.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        prompt: str = "",
        out: TextIO | None = None,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._prompt = prompt
        self._out = out if out is not None else sys.stdout

    def wait_for_press(self) -> bool:
        """Block until a line is read."""
        if self._prompt:
            self._out.write(self._prompt)
            self._out.flush()
        line = self._stream.readline()
        if not line:
            return False
        return line.strip().lower() != "q"


class StubDisplayOutput(DisplayOutput):
    """Prints display content to a text stream.

    Also keeps every displayed line for testing.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.lines: list[str] = []

    def show_text(self, text: str) -> None:
        """Display text (prints to the stream)."""
        self.lines.append(text)
        print(text, file=self._stream if self._stream is not None else sys.stdout)
