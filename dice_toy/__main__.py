"""Command line entry point for ``python -m dice_toy``."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from textwrap import dedent

from dice_toy.core.config import load_settings, validate_log_level
from dice_toy.core.controller import DiceController
from dice_toy.hardware.interfaces import ButtonInput
from dice_toy.hardware.stubs import KeyboardButtonInput, StubButtonInput, StubDisplayOutput

__all__ = ["cli"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m dice_toy",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=dedent(
            """\
            Single-button electronic dice
            -----------------------------
            Each press moves the dice through power on, stop and power off.
            Without arguments the button is pressed three times.
            """
        ),
    )
    parser.add_argument(
        "-n", "--presses", type=int, default=None,
        help="number of scripted button presses (default: PRESS_COUNT or 3)",
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true",
        help="press the button by hitting Enter; 'q' or EOF quits",
    )
    parser.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    parser.add_argument("--env", type=Path, default=None, help="path to a .env file")
    parser.add_argument("--config", type=Path, default=None, help="path to a YAML config")
    return parser


def cli(argv: list[str] | None = None) -> int:
    """Entry-point for ``python -m dice_toy``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(env_path=args.env, yaml_path=args.config)
    except ValueError as e:
        parser.error(str(e))

    presses = settings.press_count if args.presses is None else args.presses
    if presses < 0:
        parser.error(f"--presses must be non-negative, got {presses}")

    try:
        log_level = validate_log_level(args.log_level or settings.log_level)
    except ValueError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    button: ButtonInput
    if args.interactive:
        button = KeyboardButtonInput(prompt="Press Enter (q to quit): ", out=sys.stderr)
    else:
        button = StubButtonInput(presses)

    controller = DiceController(settings, button, display=StubDisplayOutput())
    controller.run()
    return 0


if __name__ == "__main__":
    sys.exit(cli())
