"""
Primality Testing

Two interchangeable tests with the same contract, is_prime(num) -> bool:
- Trial division by odd integers up to sqrt(num)
- Deterministic Miller-Rabin with a fixed witness set

Both are total functions: any integer may be passed, including
negatives, 0 and 1.
"""

from .rsa_math import mod_exp


# First 13 primes. Testing against all of them is exact below this bound.
MILLER_RABIN_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41)
MILLER_RABIN_EXACT_BOUND = 3317044064679887385961981


def is_prime(num: int) -> bool:
    """
    Check primality by trial division.
    
    Values <= 1 are not prime, 2 is prime, other even values are not.
    Odd values are divided by 3, 5, 7, ... while the divisor squared
    does not exceed num.
    
    Args:
        num: Integer to test
        
    Returns:
        True if num is prime, False otherwise
    """
    if num <= 1:
        return False
    if num == 2:
        return True
    if num % 2 == 0:
        return False
    
    i = 3
    while i * i <= num:
        if num % i == 0:
            return False
        i += 2
    return True


def is_prime_miller_rabin(n: int) -> bool:
    """
    Deterministic Miller-Rabin primality test.
    
    Uses the fixed witnesses in MILLER_RABIN_WITNESSES instead of random
    ones, which makes the answer exact for n < MILLER_RABIN_EXACT_BOUND.
    Above that bound a composite could in theory slip through.
    
    Algorithm:
    1. Write n-1 as 2^r * d (factor out powers of 2)
    2. For each witness a:
       - Compute x = a^d mod n
       - If x = 1 or x = n-1, continue
       - Square x up to r-1 times, looking for n-1
       - If never found, n is composite
    
    Args:
        n: Number to test for primality
        
    Returns:
        True if n is prime, False if composite
    """
    if n < 2:
        return False
    
    for p in MILLER_RABIN_WITNESSES:
        if n == p:
            return True
        if n % p == 0:
            return False
    
    # Write n-1 as 2^r * d
    r, d = 0, n - 1
    while d % 2 == 0:
        r += 1
        d //= 2
    
    for a in MILLER_RABIN_WITNESSES:
        x = mod_exp(a, d, n)
        
        if x == 1 or x == n - 1:
            continue
        
        composite = True
        for _ in range(r - 1):
            x = mod_exp(x, 2, n)
            if x == n - 1:
                composite = False
                break
        
        if composite:
            return False
    
    return True
