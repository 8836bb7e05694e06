"""
RSA key containers.

Neither key carries p, q or phi; those stay inside key generation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PublicKey:
    """Public key (e, n)."""
    e: int
    n: int
    
    def __iter__(self):
        return iter((self.e, self.n))
    
    def __str__(self) -> str:
        return f"({self.e}, {self.n})"


@dataclass(frozen=True)
class PrivateKey:
    """Private key (d, n)."""
    d: int
    n: int
    
    def __iter__(self):
        return iter((self.d, self.n))
    
    def __repr__(self) -> str:
        return f"PrivateKey(d=<hidden>, n={self.n})"
    
    def __str__(self) -> str:
        return f"({self.d}, {self.n})"
