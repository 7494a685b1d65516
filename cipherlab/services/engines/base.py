from abc import ABC, abstractmethod

from cipherlab.models.schemas import CipherType


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine instance owns a validated key and never mutates it, so
    every transform is a pure function of (key, input). Each cipher
    implementation must provide:
    - from_key(): Build an engine from an untyped request key
    - encode(): Encrypt open text
    - decode(): Decrypt cipher text
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    description: str
    key_format: str

    @classmethod
    @abstractmethod
    def from_key(cls, key: str | int, text: str) -> "CipherEngine":
        """
        Build an engine from a key as it arrives from a caller.

        Args:
            key: The raw key (keyword or number)
            text: The text the engine is about to process

        Returns:
            A ready engine

        Raises:
            CipherError: If the key is invalid
        """
        pass

    @abstractmethod
    def encode(self, text: str) -> str:
        """
        Encrypt open text.

        Args:
            text: The open text

        Returns:
            Cipher text

        Raises:
            CipherError: If the text is invalid
        """
        pass

    @abstractmethod
    def decode(self, text: str, reference: str | None = None) -> str:
        """
        Decrypt cipher text.

        Args:
            text: The cipher text
            reference: Open text reference, for ciphers that need one

        Returns:
            Open text

        Raises:
            CipherError: If the text is invalid
        """
        pass

    @abstractmethod
    def explain(self) -> str:
        """
        Generate human-readable explanation of the key in use.

        Returns:
            Explanation string
        """
        pass
