"""
Encryption Session

One round trip: generate keys, encrypt a message byte by byte, decrypt it
again, and render what happened. Keys live only for the session.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .config import PrimeRange, MAX_MESSAGE_LENGTH
from .core_crypto.byte_cipher import encrypt, decrypt
from .core_crypto.keygen import generate_keypair
from .core_crypto.keys import PublicKey, PrivateKey


@dataclass
class SessionResult:
    """Keys, ciphertext and recovered plaintext of one session."""
    public_key: PublicKey
    private_key: PrivateKey
    plaintext: bytes
    ciphertext: List[int] = field(default_factory=list)
    recovered: bytes = b""
    
    @property
    def round_trip_ok(self) -> bool:
        """True if decryption gave back the original plaintext."""
        return self.recovered == self.plaintext


def read_message(line: str, max_length: int = MAX_MESSAGE_LENGTH) -> bytes:
    """
    Turn a line of user input into plaintext bytes.
    
    Everything from the first newline on is dropped, then the UTF-8
    encoding is cut to max_length - 1 bytes.
    
    Args:
        line: Raw input line
        max_length: Buffer size including the terminator slot
        
    Returns:
        Plaintext bytes
    """
    if max_length < 1:
        raise ValueError("max_length must be at least 1")
    text = line.split("\n", 1)[0].rstrip("\r")
    return text.encode("utf-8")[:max_length - 1]


def run_session(
    message: bytes,
    prime_range: Optional[PrimeRange] = None,
    rng=None
) -> SessionResult:
    """
    Generate a keypair and push message through encrypt and decrypt.
    
    Raises:
        SizeError: If the sampled primes give n <= 255
    """
    public_key, private_key = generate_keypair(prime_range, rng)
    ciphertext = encrypt(message, public_key)
    recovered = decrypt(ciphertext, private_key)
    return SessionResult(
        public_key=public_key,
        private_key=private_key,
        plaintext=message,
        ciphertext=ciphertext,
        recovered=recovered,
    )


def ascii_values(data: bytes) -> str:
    """Render byte values separated by spaces."""
    return " ".join(str(b) for b in data)


def _as_text(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


def format_report(result: SessionResult) -> str:
    """Render a session the way the command line prints it."""
    lines = [
        "Generated Keys:",
        f"n = {result.public_key.n}",
        f"Public Key (e, n): {result.public_key}",
        f"Private Key (d, n): {result.private_key}",
        "",
        f"Original Message: {_as_text(result.plaintext)}",
        f"ASCII values: {ascii_values(result.plaintext)}",
        "",
        f"Encrypted Values: {' '.join(str(c) for c in result.ciphertext)}",
        "",
        f"Decrypted Message: {_as_text(result.recovered)}",
        f"ASCII values: {ascii_values(result.recovered)}",
    ]
    return "\n".join(lines)
