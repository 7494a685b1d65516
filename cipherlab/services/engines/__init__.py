"""Cipher engines."""

from cipherlab.services.engines.route import RouteCipher
from cipherlab.services.engines.substitution import SubstitutionCipher

__all__ = [
    "RouteCipher",
    "SubstitutionCipher",
]
