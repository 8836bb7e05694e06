# Core Cryptography Module
"""
Core RSA building blocks:
- Primality testing
- Modular arithmetic (gcd, inverse, exponentiation)
- Key generation
- Byte-wise encryption/decryption
"""
