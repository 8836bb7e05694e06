"""
ToyRSA configuration.

Default sampling range and size limits used by key generation and the
session driver.
"""

from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

DEFAULT_PRIME_LOW = 100
DEFAULT_PRIME_HIGH = 1000

# n must reach this value so every byte 0-255 is its own residue mod n
MIN_MODULUS = 256

INITIAL_PUBLIC_EXPONENT = 3

# Line buffer size, one slot is reserved for the terminator
MAX_MESSAGE_LENGTH = 100


# ============================================================================
# Prime Range
# ============================================================================

@dataclass(frozen=True)
class PrimeRange:
    """
    Closed range [low, high] that primes p and q are drawn from.
    
    Example:
        >>> PrimeRange(100, 1000)
        PrimeRange(low=100, high=1000)
    """
    low: int
    high: int
    
    def __post_init__(self):
        if self.low > self.high:
            raise ValueError(
                f"Invalid prime range: low ({self.low}) > high ({self.high})"
            )
    
    @classmethod
    def default(cls) -> 'PrimeRange':
        """Range used when the caller does not pick one."""
        return cls(DEFAULT_PRIME_LOW, DEFAULT_PRIME_HIGH)
    
    def __str__(self) -> str:
        return f"[{self.low}, {self.high}]"
