import random
from dataclasses import dataclass
from typing import Any, ClassVar

from cipher_suite.core.exceptions import InvalidKeyError
from cipher_suite.models.schemas import CipherFamily, CipherType
from cipher_suite.services.engines.base import CipherEngine, letter_example, shift_letter
from cipher_suite.services.engines.registry import EngineRegistry


@dataclass(frozen=True)
class CaesarKey:
    """A Caesar shift, always normalized to 0-25."""

    shift: int

    # Longest string key accepted, well under CPython's int() digit limit
    MAX_KEY_LENGTH: ClassVar[int] = 64

    @classmethod
    def from_raw(cls, raw: Any) -> "CaesarKey":
        """
        Build a key from any integer, or a string holding one.

        Negative and overflowing values wrap around, so -1 becomes 25
        and 29 becomes 3. String keys may be at most MAX_KEY_LENGTH characters.
        """
        if isinstance(raw, bool):
            raise InvalidKeyError("Caesar key must be an integer", {"key": raw})
        if isinstance(raw, str):
            text = raw.strip()
            if len(text) > cls.MAX_KEY_LENGTH:
                raise InvalidKeyError(
                    f"Caesar key is longer than {cls.MAX_KEY_LENGTH} characters",
                    {"key": _preview(text), "length": len(text)},
                )
            try:
                raw = int(text)
            except ValueError:
                raise InvalidKeyError(
                    f"Caesar key must be an integer, got '{_preview(text)}'",
                    {"key": _preview(text)},
                ) from None
        if not isinstance(raw, int):
            raise InvalidKeyError("Caesar key must be an integer", {"key": _preview(repr(raw))})
        return cls(((raw % 26) + 26) % 26)


def _preview(text: str, limit: int = 20) -> str:
    """Shorten a rejected key before echoing it back."""
    return text if len(text) <= limit else f"{text[:limit]}..."


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount, wrapping around the end of the alphabet. Case is kept
    and anything that is not an ASCII letter passes through unchanged.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )
    requires_key = True

    def __init__(self, key: int | str | None = None) -> None:
        super().__init__()
        self._key: CaesarKey | None = None
        if key is not None:
            self.set_key(key)

    @property
    def key(self) -> CaesarKey | None:
        return self._key

    def set_key(self, raw: int | str) -> None:
        """Normalize and store the shift."""
        self._key = CaesarKey.from_raw(raw)

    def configure(self, key: Any) -> None:
        self.set_key(key)

    def generate_random_key(self) -> str:
        """Generate a random shift (1-25, excluding 0 and 26)."""
        return str(random.randint(1, 25))

    def key_repr(self) -> str | None:
        return str(self._key.shift) if self._key is not None else None

    def explain(self, source: str, result: str) -> str:
        """Generate human-readable explanation."""
        shift = self._require_key().shift

        return (
            f"Caesar cipher with shift of {shift}. "
            f"Each letter was moved {shift} positions through the alphabet."
            f"{letter_example(source, result)}"
        )

    def _require_key(self) -> CaesarKey:
        if self._key is None:
            raise InvalidKeyError("Caesar cipher requires a shift key")
        return self._key

    def _encrypt_text(self, text: str) -> str:
        """Encrypt using Caesar cipher."""
        shift = self._require_key().shift
        return "".join(shift_letter(char, shift) for char in text)

    def _decrypt_text(self, text: str) -> str:
        """Decrypt by shifting in reverse."""
        shift = self._require_key().shift
        return "".join(shift_letter(char, -shift) for char in text)
