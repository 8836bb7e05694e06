"""
RSA Mathematical Operations Implementation

Implements the modular arithmetic that key generation and the byte
cipher are built on:
- Greatest common divisor (Euclidean algorithm)
- Extended Euclidean Algorithm for modular inverse
- Modular exponentiation (square-and-multiply algorithm)

Note: Python integers are arbitrary precision, so the squaring step in
      mod_exp never overflows no matter how large the modulus is.
"""

from typing import Tuple


def gcd(a: int, b: int) -> int:
    """
    Compute the greatest common divisor using Euclidean algorithm.
    
    Repeatedly replaces (a, b) with (b, a mod b) until b is 0.
    
    Args:
        a: First non-negative integer
        b: Second non-negative integer
        
    Returns:
        GCD of a and b (gcd(a, 0) == a)
    """
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Bezout coefficients by the iterative extended Euclidean algorithm.
    
    Returns (g, x, y) with g = gcd(a, b) and a*x + b*y == g. Runs the
    remainder sequence once, carrying the coefficient pairs alongside.
    """
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    
    return old_r, old_x, old_y


def mod_inverse(e: int, phi: int) -> int:
    """
    Compute modular multiplicative inverse using Extended Euclidean Algorithm.
    
    Finds d such that (e * d) mod phi = 1, normalized into [0, phi).
    
    The caller must pass a coprime pair; this is not checked here and a
    non-coprime pair gives a meaningless result. phi == 1 has no useful
    inverse and returns 0 by convention.
    
    Args:
        e: The number to find inverse of
        phi: The modulus
        
    Returns:
        Modular inverse of e mod phi
    """
    if phi == 1:
        return 0
    
    _, x, _ = extended_gcd(e % phi, phi)
    
    if x < 0:
        x += phi
    return x


def mod_exp(base: int, exponent: int, modulus: int) -> int:
    """
    Raise base to exponent modulo modulus by repeated squaring.
    
    Walks the exponent from its lowest bit upward: base is reduced
    first, multiplied into the running result whenever the current bit
    is set, then squared, and the exponent is shifted right. Takes about
    log2(exponent) squarings. Both encryption and decryption go through
    here.
    
    Raises:
        ValueError: If exponent < 0 or modulus < 1
    """
    if exponent < 0:
        raise ValueError("Exponent must be non-negative")
    if modulus < 1:
        raise ValueError("Modulus must be positive")
    if modulus == 1:
        return 0
    
    base = base % modulus
    result = 1
    
    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        
        base = (base * base) % modulus
        exponent >>= 1
    
    return result
