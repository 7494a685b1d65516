from cipherlab.core.exceptions import CipherError
from cipherlab.models.schemas import CipherType
from cipherlab.services.engines.alphabet import is_latin_letter
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry


@EngineRegistry.register
class RouteCipher(CipherEngine):
    """
    Route transposition cipher engine.

    The text is written into a grid row by row, the key being the number
    of columns, and read back column by column from the rightmost column
    to the leftmost, top to bottom within each column.

    Example with key 3:

        P R I
        V E T

    Read columns 3, 2, 1: IT + RE + PV -> ITREPV

    The grid has floor(n / key) rows. Letters that do not fill a whole
    row are dropped, so only texts whose length is a multiple of the key
    survive a round trip.
    """

    name = "Route Transposition Cipher"
    cipher_type = CipherType.ROUTE
    description = (
        "A transposition cipher that writes Latin text into a grid by rows "
        "and reads it out by columns from right to left. The number of "
        "columns is the key."
    )
    key_format = "Integer column count, 2 <= key <= text length"

    def __init__(self, key: int, text: str):
        self._key = self._get_valid_key(key, text)

    @classmethod
    def from_key(cls, key: str | int, text: str) -> "RouteCipher":
        """Build from an integer key or a string of decimal digits."""
        if isinstance(key, str):
            if not key.isascii() or not key.isdigit():
                raise CipherError("Key must be an integer", {"key": key[:20]})
            try:
                key = int(key)
            except ValueError:
                # more digits than int() converts
                raise CipherError("Key out of range", {"key": key[:20]})
        return cls(key, text)

    @property
    def key(self) -> int:
        """Number of grid columns."""
        return self._key

    def encryption(self, text: str) -> str:
        """
        Encrypt Latin open text.

        Spaces are removed, case is preserved.

        Raises:
            CipherError: If the text is empty, holds anything but Latin
                letters and spaces, or has fewer letters than the key
        """
        t = self._get_valid_open_text(text)
        self._check_key_fits(len(t))

        rows = len(t) // self._key
        cols = self._key
        grid = [""] * (rows * cols)

        # Write by rows
        k = 0
        for i in range(rows):
            for j in range(cols):
                grid[i * cols + j] = t[k]
                k += 1

        # Read by columns, right to left
        result = []
        for j in range(cols - 1, -1, -1):
            for i in range(rows):
                result.append(grid[i * cols + j])

        return "".join(result)

    def transcript(self, cipher_text: str, open_text: str) -> str:
        """
        Decrypt cipher text.

        The open text is only a length reference: its content is checked
        but never used.

        Raises:
            CipherError: If either text is empty or holds anything but
                Latin letters, or if their lengths differ
        """
        if not cipher_text or not open_text:
            raise CipherError("One of the texts is empty")

        for char in cipher_text:
            if not is_latin_letter(char):
                raise CipherError(
                    "Invalid characters in cipher text",
                    {"character": char},
                )

        for char in open_text:
            if not is_latin_letter(char):
                raise CipherError(
                    "Invalid characters in open text",
                    {"character": char},
                )

        t = self._get_valid_cipher_text(cipher_text, open_text)
        self._check_key_fits(len(t))

        rows = len(t) // self._key
        cols = self._key
        grid = [""] * (rows * cols)

        # Write by columns, right to left
        k = 0
        for j in range(cols - 1, -1, -1):
            for i in range(rows):
                grid[i * cols + j] = t[k]
                k += 1

        # Read by rows
        return "".join(grid)

    def encode(self, text: str) -> str:
        return self.encryption(text)

    def decode(self, text: str, reference: str | None = None) -> str:
        if reference is None:
            raise CipherError("Route decryption needs the open text as a length reference")
        return self.transcript(text, reference)

    def explain(self) -> str:
        """Generate human-readable explanation."""
        return (
            f"Route transposition with {self._key} columns. "
            f"The text is written into the grid row by row and read "
            f"column by column from column {self._key} back to column 1."
        )

    def _check_key_fits(self, length: int) -> None:
        if self._key > length:
            raise CipherError(
                "Key exceeds text length",
                {"key": self._key, "length": length},
            )

    @staticmethod
    def _get_valid_key(key: int, text: str) -> int:
        # bool is an int subclass but never a column count
        if not isinstance(key, int) or isinstance(key, bool):
            raise CipherError("Key must be an integer", {"key": key})
        if key < 2 or key > len(text):
            raise CipherError(
                "Key out of range",
                {"key": key, "min": 2, "max": len(text)},
            )
        return key

    @staticmethod
    def _get_valid_open_text(text: str) -> str:
        if not text:
            raise CipherError("Missing open text")

        letters = []
        for char in text:
            if char == " ":
                continue
            if not is_latin_letter(char):
                raise CipherError(
                    "Invalid characters in open text",
                    {"character": char},
                )
            letters.append(char)

        return "".join(letters)

    @staticmethod
    def _get_valid_cipher_text(text: str, open_text: str) -> str:
        if len(text) != len(open_text):
            raise CipherError(
                "Cipher text length does not match open text length",
                {"cipher_length": len(text), "open_length": len(open_text)},
            )
        return text
