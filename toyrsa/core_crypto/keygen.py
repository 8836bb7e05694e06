"""
RSA Key Generation

Generates a two-prime keypair over small integers:
1. Draw p from the prime range by rejection sampling
2. Draw q the same way, also rejecting q == p
3. n = p * q, phi = (p - 1)(q - 1)
4. Fail with SizeError if n <= 255
5. e = smallest integer >= 3 with gcd(e, phi) = 1
6. d = e^(-1) mod phi

The random source is injected: any object with a randint(low, high)
method, such as random.Random. It is NOT a cryptographically secure
source and the primes are small enough to factor by hand.
"""

import random
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from .. import logger
from ..config import PrimeRange, MIN_MODULUS, INITIAL_PUBLIC_EXPONENT
from .byte_cipher import encrypt, decrypt
from .keys import PublicKey, PrivateKey
from .primality import is_prime
from .rsa_math import gcd, mod_inverse


# ============================================================================
# Errors
# ============================================================================

class KeyGenerationError(Exception):
    """Raised when a usable keypair cannot be produced."""
    pass


class SizeError(KeyGenerationError):
    """Raised when the sampled primes give a modulus too small for bytes."""
    
    def __init__(self, p: int, q: int, n: int):
        self.p = p
        self.q = q
        self.n = n
        super().__init__(
            f"n = {n} is too small (must be > {MIN_MODULUS - 1} for proper "
            f"encryption); generated primes p = {p}, q = {q} are too small"
        )


class ExponentSearchError(KeyGenerationError):
    """Raised when no public exponent below phi is coprime with phi."""
    pass


# ============================================================================
# Exponent Search
# ============================================================================

def find_public_exponent(phi: int, start: int = INITIAL_PUBLIC_EXPONENT) -> int:
    """
    Find the smallest e >= start with gcd(e, phi) = 1 and e < phi.
    
    Steps by 1, not by 2, so e can come out even.
    
    Args:
        phi: Totient (p-1)(q-1)
        start: First candidate
        
    Returns:
        Public exponent e
        
    Raises:
        ExponentSearchError: If every candidate below phi shares a factor
    """
    e = start
    while e < phi:
        if gcd(e, phi) == 1:
            return e
        e += 1
    raise ExponentSearchError(f"No public exponent in [{start}, {phi}) is coprime with {phi}")


# ============================================================================
# Key Generator
# ============================================================================

class KeyGenerator:
    """
    Samples primes from a range and derives an RSA keypair.
    
    Example:
        >>> gen = KeyGenerator(PrimeRange(100, 1000), rng=random.Random(42))
        >>> public_key, private_key = gen.generate()
    """
    
    def __init__(
        self,
        prime_range: Optional[PrimeRange] = None,
        rng=None,
        primality_test: Callable[[int], bool] = is_prime
    ):
        """
        Initialize the generator.
        
        Args:
            prime_range: Closed range to draw p and q from
            rng: Object with randint(low, high); a fresh random.Random if None
            primality_test: Predicate used to accept a draw
            
        Raises:
            ValueError: If the range holds fewer than two primes
        """
        self._range = prime_range or PrimeRange.default()
        self._rng = rng if rng is not None else random.Random()
        self._is_prime = primality_test
        
        if self._count_primes(limit=2) < 2:
            raise ValueError(
                f"Prime range {self._range} must contain at least two primes"
            )
    
    @property
    def prime_range(self) -> PrimeRange:
        """Range primes are drawn from."""
        return self._range
    
    def _count_primes(self, limit: int) -> int:
        """Count primes in the range, stopping once limit is reached."""
        count = 0
        for candidate in range(self._range.low, self._range.high + 1):
            if self._is_prime(candidate):
                count += 1
                if count >= limit:
                    break
        return count
    
    def _sample_prime(self, exclude: Optional[int] = None) -> Tuple[int, int]:
        """
        Draw until a prime other than exclude comes up.
        
        Returns:
            Tuple (prime, number of rejected draws)
        """
        rejected = 0
        while True:
            candidate = self._rng.randint(self._range.low, self._range.high)
            if candidate != exclude and self._is_prime(candidate):
                return candidate, rejected
            rejected += 1
    
    def generate(self) -> Tuple[PublicKey, PrivateKey]:
        """
        Generate a keypair.
        
        Returns:
            Tuple (public_key, private_key)
            
        Raises:
            SizeError: If n = p * q is not greater than 255
        """
        p, rejected_p = self._sample_prime()
        q, rejected_q = self._sample_prime(exclude=p)
        logger.debug(
            'Sampled primes from %s after %d rejected draws',
            self._range, rejected_p + rejected_q
        )
        
        n = p * q
        phi = (p - 1) * (q - 1)
        
        if n < MIN_MODULUS:
            logger.warning('Modulus %d too small for byte encryption', n)
            raise SizeError(p, q, n)
        
        e = find_public_exponent(phi)
        d = mod_inverse(e, phi)
        logger.debug('Generated keypair n=%d e=%d', n, e)
        
        return PublicKey(e, n), PrivateKey(d, n)


def generate_keypair(
    prime_range: Optional[PrimeRange] = None,
    rng=None
) -> Tuple[PublicKey, PrivateKey]:
    """
    Generate an RSA keypair from primes in prime_range.
    
    Args:
        prime_range: Closed range to draw p and q from (default [100, 1000])
        rng: Object with randint(low, high)
        
    Returns:
        Tuple (public_key, private_key)
        
    Raises:
        SizeError: If the sampled primes give n <= 255
    """
    return KeyGenerator(prime_range, rng).generate()


# ============================================================================
# Key Pair
# ============================================================================

class KeyPair:
    """
    Matching public and private key, bound for byte-wise encryption.
    
    Example:
        >>> keypair = KeyPair.generate(rng=random.Random(7))
        >>> keypair.decrypt(keypair.encrypt(b"Hello"))
        b'Hello'
    """
    
    def __init__(self, public_key: PublicKey, private_key: PrivateKey):
        if public_key.n != private_key.n:
            raise ValueError("Public and private key moduli differ")
        self.public_key = public_key
        self.private_key = private_key
    
    @classmethod
    def generate(
        cls,
        prime_range: Optional[PrimeRange] = None,
        rng=None
    ) -> 'KeyPair':
        return cls(*generate_keypair(prime_range, rng))
    
    @property
    def modulus(self) -> int:
        return self.public_key.n
    
    def encrypt(self, data: Union[bytes, Sequence[int]]) -> List[int]:
        return encrypt(data, self.public_key)
    
    def decrypt(self, ciphertext: Iterable[int]) -> bytes:
        return decrypt(ciphertext, self.private_key)
    
    def __repr__(self) -> str:
        return f"KeyPair(n={self.modulus}, e={self.public_key.e})"
