import string

from cipher_suite.core.exceptions import MalformedCiphertextError
from cipher_suite.models.schemas import CipherFamily, CipherType
from cipher_suite.services.engines.base import CipherEngine, alphabet_position
from cipher_suite.services.engines.registry import EngineRegistry


@EngineRegistry.register
class A1Z26Engine(CipherEngine):
    """
    A1Z26 cipher engine.

    Replaces each letter with its position in the alphabet, written as two
    digits (A -> 01, Z -> 26). Output length is not tied to input length.

    Decryption reads digits in fixed pairs. Letters found in ciphertext are
    turned into their (unpadded) position instead.
    """

    name = "A1Z26 Cipher"
    cipher_type = CipherType.A1Z26
    cipher_family = CipherFamily.ENCODING
    description = (
        "Each letter is replaced by its position in the alphabet, "
        "A=01 through Z=26. Case is ignored."
    )

    def explain(self, source: str, result: str) -> str:
        """Generate human-readable explanation."""
        return (
            "A1Z26 replaces each letter with its alphabet position as two digits "
            "(A=01, B=02, ... Z=26); decoding reads the digits back in pairs. "
            f"{len(source)} input characters produced {len(result)} output characters."
        )

    def _encrypt_text(self, text: str) -> str:
        result = []

        for char in text:
            if char in string.ascii_letters:
                result.append(f"{alphabet_position(char):02d}")
            else:
                result.append(char)

        return "".join(result)

    def _decrypt_text(self, text: str) -> str:
        result = []
        i = 0

        while i < len(text):
            char = text[i]
            if char in string.digits:
                pair = text[i:i + 2]
                if len(pair) < 2 or pair[1] not in string.digits:
                    raise MalformedCiphertextError(
                        f"Expected a two-digit group at position {i}, got '{pair}'",
                        position=i,
                        fragment=pair,
                    )
                number = int(pair)
                if not 1 <= number <= 26:
                    raise MalformedCiphertextError(
                        f"Group '{pair}' at position {i} is outside 01-26",
                        position=i,
                        fragment=pair,
                    )
                result.append(chr(ord("a") + number - 1))
                i += 2
                continue

            if char in string.ascii_letters:
                result.append(str(alphabet_position(char)))
            else:
                result.append(char)
            i += 1

        return "".join(result)
