import string
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Protocol, runtime_checkable

from cipher_suite.core.logging_config import LoggingConfig
from cipher_suite.models.schemas import CipherFamily, CipherType

logger = LoggingConfig.get_logger(__name__)


@runtime_checkable
class Cipher(Protocol):
    """
    The capability every cipher exposes.

    Callers hold a Cipher and never need to know which variant is behind it:
    set the message, run encrypt() or decrypt(), then read get_result().
    """

    def set_message(self, text: str) -> None: ...

    def encrypt(self) -> None: ...

    def decrypt(self) -> None: ...

    def get_result(self) -> str: ...


@runtime_checkable
class ConfigurableCipher(Cipher, Protocol):
    """A Cipher that can also be keyed and can describe what it did."""

    name: str
    requires_key: bool

    def configure(self, key: Any) -> None: ...

    def generate_random_key(self) -> str | None: ...

    def key_repr(self) -> str | None: ...

    def explain(self, source: str, result: str) -> str: ...


def shift_letter(char: str, shift: int) -> str:
    """Shift an ASCII letter by `shift` positions, keeping its case."""
    if char in string.ascii_uppercase:
        base = ord("A")
    elif char in string.ascii_lowercase:
        base = ord("a")
    else:
        return char
    return chr(base + (ord(char) - base + shift) % 26)


def alphabet_position(char: str) -> int:
    """1-based position of an ASCII letter (a/A=1 ... z/Z=26), 0 for anything else."""
    if char in string.ascii_letters:
        return ord(char.lower()) - ord("a") + 1
    return 0


def letter_example(source: str, result: str) -> str:
    """
    Describe what the first letter of `source` turned into.

    Only valid for length-preserving ciphers, where result[i] comes from
    source[i]. Returns "" when `source` has no ASCII letter.
    """
    for i, char in enumerate(source):
        if char in string.ascii_letters and i < len(result):
            return f" For example, '{char}' becomes '{result[i]}'."
    return ""


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Holds the message and result state shared by every variant. Each cipher
    implementation must provide:
    - _encrypt_text(): forward transformation of a string
    - _decrypt_text(): inverse transformation of a string
    - explain(): human-readable description of what was done

    The result is cleared before every encrypt/decrypt call, and left empty
    if the transformation raises.
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    requires_key: ClassVar[bool] = False

    def __init__(self) -> None:
        self._message = ""
        self._result = ""

    def set_message(self, text: str) -> None:
        """Store `text` as the input for the next encrypt/decrypt call."""
        self._message = text

    def get_result(self) -> str:
        """Return the output of the last encrypt/decrypt call ("" before any)."""
        return self._result

    def encrypt(self) -> None:
        """Run the forward transformation over the stored message."""
        self._result = ""
        logger.debug("%s encrypt: %d chars", self.cipher_type.value, len(self._message))
        self._result = self._encrypt_text(self._message)

    def decrypt(self) -> None:
        """Run the inverse transformation over the stored message."""
        self._result = ""
        logger.debug("%s decrypt: %d chars", self.cipher_type.value, len(self._message))
        self._result = self._decrypt_text(self._message)

    def configure(self, key: Any) -> None:
        """
        Apply a key to this engine.

        Keyless ciphers ignore the key. Keyed ciphers override this.
        """
        pass

    def generate_random_key(self) -> str | None:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key, or None for keyless ciphers
        """
        return None

    def key_repr(self) -> str | None:
        """String form of the configured key, or None for keyless ciphers."""
        return None

    @abstractmethod
    def _encrypt_text(self, text: str) -> str:
        """
        Encrypt a string.

        Args:
            text: The plaintext

        Returns:
            Ciphertext
        """
        pass

    @abstractmethod
    def _decrypt_text(self, text: str) -> str:
        """
        Decrypt a string.

        Args:
            text: The ciphertext

        Returns:
            Plaintext
        """
        pass

    @abstractmethod
    def explain(self, source: str, result: str) -> str:
        """
        Generate human-readable explanation of the transformation.

        Args:
            source: The input text
            result: The produced text

        Returns:
            Explanation string
        """
        pass
