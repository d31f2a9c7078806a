import random
import string
from dataclasses import dataclass
from typing import Any, ClassVar

from cipher_suite.core.exceptions import InvalidKeyError
from cipher_suite.models.schemas import CipherFamily, CipherType
from cipher_suite.services.engines.base import CipherEngine, alphabet_position, shift_letter
from cipher_suite.services.engines.registry import EngineRegistry


@dataclass(frozen=True)
class VigenereKey:
    """A non-empty keyword, read cyclically to give one shift per position."""

    keyword: str

    def __post_init__(self) -> None:
        if not isinstance(self.keyword, str) or not self.keyword:
            raise InvalidKeyError("Vigenère key must be a non-empty string")

    def shift_at(self, index: int) -> int:
        """
        Shift for the given message position.

        A key letter shifts by its 1-based position (A=1 ... Z=26);
        any other key character shifts by 0.
        """
        return alphabet_position(self.keyword[index % len(self.keyword)])


@EngineRegistry.register
class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence.

    The key position advances on every message character, letters or not,
    so punctuation and spaces still consume a key slot.
    """

    name = "Vigenère Cipher"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword. More secure than Caesar but vulnerable to "
        "Kasiski examination and frequency analysis per key position."
    )
    requires_key = True

    ALPHABET: ClassVar[str] = string.ascii_uppercase

    def __init__(self, key_message: str | None = None) -> None:
        super().__init__()
        self._key: VigenereKey | None = None
        if key_message is not None:
            self.set_key_message(key_message)

    @property
    def key(self) -> VigenereKey | None:
        return self._key

    def set_key_message(self, text: str) -> None:
        """Store the keyword. Raises InvalidKeyError if it is empty."""
        self._key = VigenereKey(text)

    def configure(self, key: Any) -> None:
        if not isinstance(key, str):
            raise InvalidKeyError("Vigenère key must be a string", {"key": repr(key)})
        self.set_key_message(key)

    def generate_random_key(self) -> str:
        """Generate a random keyword."""
        length = random.randint(4, 10)
        return "".join(random.choice(self.ALPHABET) for _ in range(length))

    def key_repr(self) -> str | None:
        return self._key.keyword if self._key is not None else None

    def explain(self, source: str, result: str) -> str:
        """Generate human-readable explanation."""
        key = self._require_key()
        shift_desc = ", ".join(f"{c}={alphabet_position(c)}" for c in key.keyword)

        return (
            f"Vigenère cipher with keyword '{key.keyword}' (length {len(key.keyword)}). "
            f"Letter shifts: {shift_desc}. "
            f"Each message character takes the next keyword character in turn, "
            f"and letters are shifted by that character's position in the alphabet."
        )

    def _require_key(self) -> VigenereKey:
        if self._key is None:
            raise InvalidKeyError("Vigenère cipher requires a key message")
        return self._key

    def _encrypt_text(self, text: str) -> str:
        """Encrypt using Vigenère cipher."""
        key = self._require_key()
        return "".join(shift_letter(char, key.shift_at(i)) for i, char in enumerate(text))

    def _decrypt_text(self, text: str) -> str:
        """Decrypt using Vigenère cipher."""
        key = self._require_key()
        return "".join(shift_letter(char, -key.shift_at(i)) for i, char in enumerate(text))
