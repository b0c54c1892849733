#!/usr/bin/env python3
"""
Hamming Code Transmission Simulator

Encodes a bit string, corrupts the codeword with 1, 2 or 3 bit flips (random
or at chosen positions), decodes the syndrome and applies the correction,
then reports whether the correction actually recovered the data.

Module: 3 (Simulation - Command-line front end)
"""

import argparse
import logging
import sys
from typing import List, Optional

from src.module1_hamming_codec import HammingCodeError, bits_to_string, coverage, parity_positions
from src.module2_error_injection import ErrorInjectionError, ErrorMode

from .config import load_config, setup_logging
from .errors import SimulationError
from .session import CorrectionStatus, TransmissionSession

_STATUS_TEXT = {
    CorrectionStatus.NO_ERROR: "No error detected",
    CorrectionStatus.CORRECTED: "Error corrected successfully",
    CorrectionStatus.MISCORRECTED: "Correction applied but INCORRECT (Hamming corrects only 1 error)",
    CorrectionStatus.UNDETECTED: "Errors present but syndrome is zero (UNDETECTED)",
}


# =============================================================================
# COMMAND-LINE INTERFACE
# =============================================================================

def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Simulate Hamming encoding, bit errors and single-error correction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single random error on the basic example
  hamming-sim --example basic --seed 42

  # Two random errors: watch the code mis-correct
  hamming-sim --data 1101001 --mode double

  # Flip chosen positions by hand
  hamming-sim --data 1011 --position 5
  hamming-sim --data 1011 --position 2 --position 6
        """
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--data",
        type=str,
        help="Binary data to encode, e.g. 1011"
    )
    source.add_argument(
        "--example",
        type=str,
        help="Name of an example from the config (basic, intermediate, advanced)"
    )

    parser.add_argument(
        "--mode",
        type=str,
        default=None,
        choices=[m.value for m in ErrorMode],
        help="Random error mode (default: simulation.default_mode from config)"
    )

    parser.add_argument(
        "--position",
        type=int,
        action="append",
        default=None,
        help="Flip this 1-indexed position instead of random errors (repeatable)"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible error positions"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML file merged over the packaged defaults"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def _format_positions(positions: List[int]) -> str:
    return ", ".join(map(str, positions)) if positions else "-"


def print_report(session: TransmissionSession, outcome) -> None:
    """Print the state of a finished simulation."""
    snap = session.snapshot()
    length = len(snap["encoded"])

    print("\n" + "=" * 60)
    print("HAMMING SIMULATION")
    print("=" * 60)
    print(f"Data:               {snap['original_data']}")
    print(f"Codeword:           {snap['encoded']}")
    for p in parity_positions(length):
        print(f"  P{p:<3} covers      {_format_positions(coverage(p, length))}")
    print(f"Transmitted:        {snap['transmitted']}")
    print(f"Injected errors:    {_format_positions(snap['injected_positions'])}")
    print(f"Syndrome:           {bits_to_string(session.syndrome[::-1])} "
          f"(= {session.error_position})")
    print(f"Corrected:          {bits_to_string(outcome.corrected)}")
    print(f"Recovered data:     {outcome.recovered}")
    print(f"Result:             {_STATUS_TEXT[outcome.status]}")
    print("=" * 60)


def run(args: argparse.Namespace) -> int:
    config = load_config(args.config)
    setup_logging(config, verbose=args.verbose)

    if args.example is not None:
        examples = config["examples"]
        if args.example not in examples:
            logging.error(
                f"Unknown example {args.example!r}; available: {', '.join(examples)}"
            )
            return 1
        data = examples[args.example]
    else:
        data = args.data

    session = TransmissionSession(config, rng=args.seed)
    info = session.encode(data)
    logging.info(f"Encoded data: {info.describe()}")

    if args.position:
        for position in args.position:
            session.toggle_bit(position)
    else:
        session.simulate_error(args.mode)

    outcome = session.correct()
    print_report(session, outcome)
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the simulator."""
    args = parse_arguments(argv)

    try:
        return run(args)
    except (HammingCodeError, ErrorInjectionError, SimulationError) as e:
        if not logging.getLogger().handlers:
            setup_logging(verbose=args.verbose)
        logging.error(f"Simulation failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
