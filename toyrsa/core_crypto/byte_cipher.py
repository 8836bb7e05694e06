"""
Byte-wise RSA Cipher

Each plaintext byte is encrypted on its own as c = b^e mod n, and each
ciphertext value is decrypted as b = c^d mod n, truncated to one byte.
There is no padding and no blocking: one value in, one value out.

Security Note:
    Encrypting single bytes with textbook RSA is a substitution cipher
    over 256 symbols and leaks everything to frequency analysis. This
    implementation is for learning purposes only.
"""

from typing import Iterable, List, Sequence, Union

from .keys import PublicKey, PrivateKey
from .rsa_math import mod_exp


BYTE_MASK = 0xFF


def encrypt(data: Union[bytes, Sequence[int]], public_key: PublicKey) -> List[int]:
    """
    Encrypt a byte sequence with the public key.
    
    Only byte values are accepted; decrypt() truncates to one byte, so
    anything wider would not come back.
    
    Args:
        data: Plaintext bytes (or a sequence of ints in [0, 255])
        public_key: PublicKey (e, n)
        
    Returns:
        One ciphertext integer in [0, n) per input byte, same order
        
    Raises:
        ValueError: If a value is not a byte or not less than n
    """
    e, n = public_key
    ciphertext = []
    for b in data:
        if b < 0 or b > BYTE_MASK:
            raise ValueError(f"Plaintext value {b} is not a byte")
        if b >= n:
            raise ValueError(f"Plaintext value {b} outside [0, {n})")
        ciphertext.append(mod_exp(b, e, n))
    return ciphertext


def decrypt(ciphertext: Iterable[int], private_key: PrivateKey) -> bytes:
    """
    Decrypt ciphertext integers with the private key.
    
    Each recovered value is truncated to its low byte. This is lossless
    for anything encrypt() produced because n > 255 and plaintext bytes
    are below 256.
    
    Args:
        ciphertext: Integers produced by encrypt()
        private_key: PrivateKey (d, n)
        
    Returns:
        Recovered plaintext bytes
    """
    d, n = private_key
    return bytes(mod_exp(c, d, n) & BYTE_MASK for c in ciphertext)
