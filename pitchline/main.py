"""Command-line entry point for pitchline.

Parses one notation command, prints the result, and exits non-zero when the
input does not resolve.
"""

import logging
import sys
from argparse import ArgumentParser, Namespace
from typing import Optional

from pitchline import constants
from pitchline.config import NotationConfig, init_config
from pitchline.interval import format_interval, parse_interval
from pitchline.midi import midi
from pitchline.pitch import format_pitch, parse_pitch
from pitchline.transpose import interval_between, transpose


def make_parser() -> ArgumentParser:
    """Create the command-line argument parser.

    Returns:
        An ArgumentParser with one subcommand per notation operation.
    """
    parser = ArgumentParser(prog="pitchline")
    parser.add_argument("--log-level", default=constants.DEFAULT_LOG_LEVEL)
    parser.add_argument(
        "--reference-freq", type=float, default=constants.DEFAULT_REFERENCE_FREQ
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("pitch", help="normalize a pitch").add_argument("text")
    commands.add_parser("interval", help="normalize an interval").add_argument(
        "text"
    )
    for name, help_text in [
        ("transpose", "transpose a pitch by an interval"),
        ("distance", "interval from the first pitch to the second"),
    ]:
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("a")
        sub.add_argument("b")
    commands.add_parser("midi", help="MIDI number of a pitch").add_argument("text")
    commands.add_parser("freq", help="frequency of a pitch").add_argument("text")
    return parser


def configure_logging(log_level: str) -> None:
    """Configure the logging system with the specified log level.

    Args:
        log_level: The logging level (e.g., 'DEBUG', 'INFO', 'WARNING').
    """
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(filename)s:%(lineno)d -- %(message)s",
        level=log_level,
    )


def run_command(args: Namespace, config: NotationConfig) -> Optional[str]:
    """Run the parsed command, returning its printable result or None."""
    match args.command:
        case "pitch":
            pitch = parse_pitch(args.text)
            return None if pitch is None else format_pitch(pitch)
        case "interval":
            ivl = parse_interval(args.text)
            return None if ivl is None else format_interval(ivl)
        case "transpose":
            return transpose(args.a, args.b)
        case "distance":
            return interval_between(args.a, args.b)
        case "midi":
            note = midi(args.text)
            return None if note is None else str(note)
        case "freq":
            freq = config.to_freq(args.text)
            return None if freq is None else str(freq)
        case _:
            raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the pitchline command.

    Parses command-line arguments, configures logging, runs the command and
    prints its result.

    Returns:
        The process exit status
    """
    parser = make_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)
    config = init_config(args.reference_freq)
    logging.debug("running %s", args.command)
    result = run_command(args, config)
    if result is None:
        logging.warning("could not resolve input for %s", args.command)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
