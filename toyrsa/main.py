"""
ToyRSA - Main Entry Point

Reads a message, generates a keypair, encrypts and decrypts the message
and prints the keys and values involved.
"""

import argparse
import logging
import random
import sys
import time

from . import logger
from .config import PrimeRange, DEFAULT_PRIME_LOW, DEFAULT_PRIME_HIGH, MAX_MESSAGE_LENGTH
from .core_crypto.keygen import SizeError
from .session import read_message, run_session, format_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Textbook RSA over small primes, one byte at a time')
    parser.add_argument('-v', '--verbose', action='count', default=0, help='Verbosity, can be stacked')
    parser.add_argument('-m', '--message', help='Message to encrypt; read from stdin if omitted')
    parser.add_argument('--low', type=int, default=DEFAULT_PRIME_LOW, help='Lower bound of the prime range')
    parser.add_argument('--high', type=int, default=DEFAULT_PRIME_HIGH, help='Upper bound of the prime range')
    parser.add_argument('--seed', type=int, help='Random seed (default: current time)')
    return parser


def main(argv=None) -> int:
    """Main entry point for ToyRSA."""
    parser = build_parser()
    args = parser.parse_args(argv)
    
    if args.verbose == 0:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.DEBUG)
    
    try:
        prime_range = PrimeRange(args.low, args.high)
    except ValueError as e:
        parser.error(str(e))
    
    seed = args.seed if args.seed is not None else time.time_ns()
    rng = random.Random(seed)
    logger.debug('Seeded random source with %d', seed)
    
    if args.message is None:
        try:
            line = input(f"Enter a message (max {MAX_MESSAGE_LENGTH} chars): ")
        except EOFError:
            print("\nError: no message read from standard input.")
            return 1
    else:
        line = args.message
    message = read_message(line)
    
    try:
        result = run_session(message, prime_range, rng)
    except SizeError as e:
        print(f"Error: n = {e.n} is too small (must be > 255 for proper encryption).")
        print(f"Generated primes p = {e.p}, q = {e.q} are too small.")
        return 1
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    
    print()
    print(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
