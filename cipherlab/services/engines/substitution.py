from typing import ClassVar

from cipherlab.core.exceptions import CipherError
from cipherlab.models.schemas import CipherType
from cipherlab.services.engines.alphabet import (
    CYRILLIC,
    Alphabet,
    cyrillic_upper,
    is_cyrillic_letter,
    is_cyrillic_upper,
)
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry


@EngineRegistry.register
class SubstitutionCipher(CipherEngine):
    """
    Keyword substitution cipher over the Cyrillic alphabet.

    A polyalphabetic cipher: each letter of the keyword is a shift, and the
    shifts are applied to the open text in turn, repeating the keyword as
    often as needed.

        C_i = (P_i + K_(i mod len(K))) mod N
        P_i = (C_i - K_(i mod len(K)) + N) mod N

    Example with keyword "БОРЩ" (shifts 1, 15, 17, 26):

        С(18) + Б(1)  = 19       -> Т
        У(20) + О(15) = 35 - 33  -> В
        П(16) + Р(17) = 33 - 33  -> А

    Encryption drops everything that is not a Cyrillic letter, while
    decryption rejects anything that is not an uppercase alphabet letter.
    """

    name = "Keyword Substitution Cipher"
    cipher_type = CipherType.SUBSTITUTION
    description = (
        "A polyalphabetic cipher over the Cyrillic alphabet. Every letter of "
        "the keyword shifts one letter of the text; the keyword repeats "
        "along the text."
    )
    key_format = "Cyrillic keyword, e.g. 'БОРЩ'; not all letters identical"

    ALPHABET: ClassVar[Alphabet] = CYRILLIC

    def __init__(self, key: str):
        keyword = self._get_valid_key(key)
        shifts = tuple(self.ALPHABET.to_positions(keyword))

        if len(shifts) > 1 and len(set(shifts)) == 1:
            raise CipherError("Weak key: all key letters are identical", {"key": key})

        self._keyword = keyword
        self._key = shifts

    @classmethod
    def from_key(cls, key: str | int, text: str) -> "SubstitutionCipher":
        """Build from a keyword; the text plays no part in key validation."""
        return cls(key)

    @property
    def key(self) -> tuple[int, ...]:
        """Shift sequence derived from the keyword."""
        return self._key

    @property
    def keyword(self) -> str:
        """Upper-cased keyword."""
        return self._keyword

    def encrypt(self, open_text: str) -> str:
        """
        Encrypt open text.

        Non-Cyrillic characters are silently removed and lowercase letters
        are upper-cased, so the result only contains alphabet letters.

        Raises:
            CipherError: If no Cyrillic letters remain after filtering
        """
        work = self.ALPHABET.to_positions(self._get_valid_open_text(open_text))
        n = self.ALPHABET.size
        for i, p in enumerate(work):
            work[i] = (p + self._key[i % len(self._key)]) % n
        return self.ALPHABET.to_text(work)

    def decrypt(self, cipher_text: str) -> str:
        """
        Decrypt cipher text.

        Raises:
            CipherError: If the text is empty or holds anything but
                uppercase alphabet letters
        """
        work = self.ALPHABET.to_positions(self._get_valid_cipher_text(cipher_text))
        n = self.ALPHABET.size
        for i, p in enumerate(work):
            work[i] = (p - self._key[i % len(self._key)] + n) % n
        return self.ALPHABET.to_text(work)

    def encode(self, text: str) -> str:
        return self.encrypt(text)

    def decode(self, text: str, reference: str | None = None) -> str:
        return self.decrypt(text)

    def explain(self) -> str:
        """Generate human-readable explanation."""
        shift_desc = ", ".join(f"{c}={s}" for c, s in zip(self._keyword, self._key))

        return (
            f"Keyword substitution with keyword '{self._keyword}' "
            f"(length {len(self._keyword)}). Letter shifts: {shift_desc}. "
            f"Each letter is shifted by the matching key letter's position in "
            f"the {self.ALPHABET.size}-letter alphabet, modulo {self.ALPHABET.size}."
        )

    def _get_valid_key(self, key: str) -> str:
        """Check the keyword and return it upper-cased."""
        if not isinstance(key, str):
            raise CipherError("Key must be a string", {"key": key})
        if not key:
            raise CipherError("Empty key")

        for char in key:
            if not is_cyrillic_letter(char):
                raise CipherError(
                    "Invalid key: contains non-letter characters",
                    {"key": key, "character": char},
                )

        return "".join(cyrillic_upper(c) for c in key)

    def _get_valid_open_text(self, text: str) -> str:
        """Keep Cyrillic letters only, upper-cased."""
        letters = "".join(cyrillic_upper(c) for c in text if is_cyrillic_letter(c))
        if not letters:
            raise CipherError("Missing open text: no Cyrillic letters found")
        return letters

    def _get_valid_cipher_text(self, text: str) -> str:
        if not text:
            raise CipherError("Empty cipher text")

        for char in text:
            if not is_cyrillic_upper(char):
                raise CipherError(
                    "Invalid cipher text: only uppercase letters are allowed",
                    {"character": char},
                )

        return text
