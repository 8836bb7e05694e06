# ToyRSA
"""
Textbook RSA over small primes, one byte per modular exponentiation.

This is for EDUCATIONAL/DEMONSTRATION purposes only - not cryptographically secure!
"""

import logging

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
