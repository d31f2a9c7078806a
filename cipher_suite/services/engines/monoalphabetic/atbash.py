import string
from typing import ClassVar

from cipher_suite.models.schemas import CipherFamily, CipherType
from cipher_suite.services.engines.base import CipherEngine, letter_example
from cipher_suite.services.engines.registry import EngineRegistry


@EngineRegistry.register
class AtbashEngine(CipherEngine):
    """
    Atbash cipher engine.

    Atbash is a monoalphabetic substitution cipher where the alphabet is reversed:
    A -> Z, B -> Y, C -> X, etc.

    Originally used for the Hebrew alphabet, it's self-reciprocal, so
    decrypting is the same operation as encrypting.
    """

    name = "Atbash Cipher"
    cipher_type = CipherType.ATBASH
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where the alphabet is reversed. "
        "A becomes Z, B becomes Y, etc. "
        "Self-reciprocal: applying twice returns the original text."
    )

    TABLE: ClassVar[dict[int, int]] = str.maketrans(
        string.ascii_uppercase + string.ascii_lowercase,
        string.ascii_uppercase[::-1] + string.ascii_lowercase[::-1],
    )

    def explain(self, source: str, result: str) -> str:
        """Generate human-readable explanation."""
        return (
            "Atbash cipher reverses the alphabet. "
            "A becomes Z, B becomes Y, C becomes X, and so on. "
            "This is a fixed substitution with no key required."
            f"{letter_example(source, result)}"
        )

    def _encrypt_text(self, text: str) -> str:
        return self._transform(text)

    def _decrypt_text(self, text: str) -> str:
        return self._transform(text)

    def _transform(self, text: str) -> str:
        """Apply Atbash transformation (self-reciprocal)."""
        return text.translate(self.TABLE)
