"""Classical Cipher Lab: keyword substitution and route transposition ciphers."""

__version__ = "0.1.0"
