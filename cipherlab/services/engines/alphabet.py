"""
Alphabets and character classification for the cipher engines.

All checks compare code points against fixed ranges so the results never
depend on the platform locale.
"""

from dataclasses import dataclass, field

CYRILLIC_LETTERS = "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ"

# А..Я and а..я are contiguous blocks; Ё and ё sit outside them.
_CYRILLIC_UPPER = ("А", "Я")
_CYRILLIC_LOWER = ("а", "я")
_CYRILLIC_CASE_OFFSET = ord("а") - ord("А")
_YO_UPPER = "Ё"
_YO_LOWER = "ё"


@dataclass(frozen=True)
class Alphabet:
    """
    Ordered letter sequence with a letter <-> position bijection.

    Example:
        >>> Alphabet("ABC").to_positions("CAB")
        [2, 0, 1]
    """

    letters: str
    _positions: dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(set(self.letters)) != len(self.letters):
            raise ValueError("Alphabet letters must be unique")
        object.__setattr__(
            self,
            "_positions",
            {letter: i for i, letter in enumerate(self.letters)},
        )

    @property
    def size(self) -> int:
        return len(self.letters)

    def __contains__(self, char: object) -> bool:
        return char in self._positions

    def position(self, letter: str) -> int:
        """Zero-based position of a letter of this alphabet."""
        return self._positions[letter]

    def letter(self, position: int) -> str:
        """Letter at a position, taken modulo the alphabet size."""
        return self.letters[position % self.size]

    def to_positions(self, text: str) -> list[int]:
        return [self._positions[c] for c in text]

    def to_text(self, positions: list[int]) -> str:
        return "".join(self.letter(p) for p in positions)


CYRILLIC = Alphabet(CYRILLIC_LETTERS)


def is_cyrillic_upper(char: str) -> bool:
    """True for А..Я and Ё."""
    return _CYRILLIC_UPPER[0] <= char <= _CYRILLIC_UPPER[1] or char == _YO_UPPER


def is_cyrillic_lower(char: str) -> bool:
    """True for а..я and ё."""
    return _CYRILLIC_LOWER[0] <= char <= _CYRILLIC_LOWER[1] or char == _YO_LOWER


def is_cyrillic_letter(char: str) -> bool:
    """
    True for any letter of the alphabet, in either case.

    Ё and ё lie outside the contiguous А..я block but are accepted, so
    every letter that decryption can produce is also accepted in keys
    and open text.
    """
    return is_cyrillic_upper(char) or is_cyrillic_lower(char)


def cyrillic_upper(char: str) -> str:
    """
    Upper-case a Cyrillic letter by fixed code-point offset.

    Characters that are not lowercase Cyrillic letters are returned as is.
    """
    if char == _YO_LOWER:
        return _YO_UPPER
    if _CYRILLIC_LOWER[0] <= char <= _CYRILLIC_LOWER[1]:
        return chr(ord(char) - _CYRILLIC_CASE_OFFSET)
    return char


def is_latin_letter(char: str) -> bool:
    """True for ASCII A..Z and a..z only."""
    return "A" <= char <= "Z" or "a" <= char <= "z"
