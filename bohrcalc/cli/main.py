"""
Main CLI entry point for bohrcalc.
"""

import argparse
import sys
from typing import List, Optional, TextIO

import yaml

from bohrcalc import __version__
from bohrcalc.console.choices import read_continue, read_energy_unit
from bohrcalc.console.readers import EndOfInputError, read_bounded_int
from bohrcalc.core.config import CalculatorSettings, load_config, settings_from_config
from bohrcalc.core.logging_config import get_logger, setup_logging
from bohrcalc.physics.bohr import TransitionSpec, compute_transition

logger = get_logger("cli.main")

WELCOME_BANNER = "Welcome to the electron transition energy calculator!"

# Largest accepted atomic or principal quantum number (32-bit signed max)
MAX_INPUT_VALUE = 2147483647


def _read_transition(stream: TextIO, out: TextIO) -> TransitionSpec:
    print(
        "\nPlease specify a value for the atomic number of the system under consideration.",
        file=out,
    )
    atomic_number = read_bounded_int(1, MAX_INPUT_VALUE, stream, out)
    print(
        "\nPlease specify a value for the initial principal quantum number "
        "of the electron under consideration.",
        file=out,
    )
    n_initial = read_bounded_int(1, MAX_INPUT_VALUE, stream, out)
    print(
        "\nPlease specify a value for the final principal quantum number "
        "of the electron under consideration.",
        file=out,
    )
    n_final = read_bounded_int(1, MAX_INPUT_VALUE, stream, out)
    return TransitionSpec(atomic_number, n_initial, n_final)


def run_session(
    stream: Optional[TextIO] = None,
    out: Optional[TextIO] = None,
    settings: Optional[CalculatorSettings] = None,
) -> int:
    """
    Run the interactive calculator until the user declines to continue.

    Parameters
    ----------
    stream : file-like, optional
        Input stream (default sys.stdin)
    out : file-like, optional
        Output stream (default sys.stdout)
    settings : CalculatorSettings, optional
        Constants and display precision

    Returns
    -------
    int
        Number of energies reported

    Raises
    ------
    EndOfInputError
        If input ends before the user chooses to stop
    """
    stream = sys.stdin if stream is None else stream
    out = sys.stdout if out is None else out
    if settings is None:
        settings = CalculatorSettings()

    print(WELCOME_BANNER, file=out)

    completed = 0
    while True:
        spec = _read_transition(stream, out)

        if not spec.is_ordered:
            logger.info(f"Rejected upward transition {spec}")
            print(
                "\nThe initial principal quantum number must be greater than "
                "the final principal quantum number!",
                file=out,
            )
            print("Let's start again!", file=out)
            continue

        print("\nDo you want the results in electron-volts or joules?", file=out)
        unit = read_energy_unit(stream, out)

        result = compute_transition(spec, unit, settings)
        completed += 1

        print(f"\nFor a {spec} transition the energy was calculated to be: ", file=out)
        print(f"    E = {result.formatted(settings.significant_digits)}", file=out)

        print("\nDo you wish to continue? [y/n]:", file=out)
        if not read_continue(stream, out):
            break

    logger.info(f"Session finished after {completed} calculation(s)")
    return completed


def _load_settings(config_path: Optional[str]) -> CalculatorSettings:
    if config_path is None:
        return CalculatorSettings()
    logger.info(f"Loading configuration from {config_path}")
    return settings_from_config(load_config(config_path))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bohrcalc",
        description="Interactive Bohr-model electron transition energy calculator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Optional settings file (YAML or JSON) with a 'calculator' section",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(level=args.log_level)

    try:
        settings = _load_settings(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load configuration: {e}")
        print(f"ERROR: Failed to load configuration: {e}")
        return 1

    try:
        run_session(settings=settings)
    except EndOfInputError as e:
        logger.error(f"Session aborted: {e}")
        print("\nInput ended before the calculation was complete.")
        return 1
    except KeyboardInterrupt:
        print("\nCalculation interrupted by user.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
