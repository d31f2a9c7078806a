from dataclasses import dataclass
from typing import Any

from cipher_suite.core.config import Settings, get_settings
from cipher_suite.core.exceptions import InvalidKeyError, MessageTooLongError
from cipher_suite.core.logging_config import LoggingConfig
from cipher_suite.models.schemas import CipherType, Direction
from cipher_suite.services.engines.base import ConfigurableCipher
from cipher_suite.services.engines.registry import EngineRegistry

logger = LoggingConfig.get_logger(__name__)


@dataclass
class CipherOutcome:
    """Result of running one cipher over one message."""

    result: str
    cipher_type: CipherType
    direction: Direction
    key_used: str | None
    explanation: str


class CipherService:
    """
    Runs a single cipher operation end to end.

    Each call creates a fresh engine, configures it, runs it in the
    requested direction, reads the result and drops the engine, so no key
    or message survives from one call to the next.
    """

    def __init__(
        self,
        registry: EngineRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.registry = registry or EngineRegistry()
        self.settings = settings or get_settings()

    def run(
        self,
        cipher_type: CipherType,
        message: str,
        direction: Direction,
        key: Any = None,
    ) -> CipherOutcome:
        """
        Encrypt or decrypt a message.

        Args:
            cipher_type: Which cipher to use
            message: Plaintext or ciphertext, depending on direction
            direction: Encrypt or decrypt
            key: Cipher key; generated when encrypting with a keyed cipher
                and none is given

        Returns:
            CipherOutcome with the produced text and the key that was used

        Raises:
            MessageTooLongError: If the message exceeds the configured limit
            InvalidKeyError: If a keyed cipher gets a bad key, or no key on decrypt
            MalformedCiphertextError: If the ciphertext cannot be decoded
            EngineNotFoundError: If the cipher type is not registered
        """
        if len(message) > self.settings.max_message_length:
            raise MessageTooLongError(len(message), self.settings.max_message_length)

        engine: ConfigurableCipher = self.registry.create_engine(cipher_type)

        if engine.requires_key and key is None:
            if direction == Direction.DECRYPT:
                raise InvalidKeyError(
                    f"A key is required to decrypt with {engine.name}",
                    {"cipher_type": cipher_type.value},
                )
            key = engine.generate_random_key()
            logger.info("Generated random key for %s", cipher_type.value)

        engine.configure(key)
        engine.set_message(message)

        if direction == Direction.ENCRYPT:
            engine.encrypt()
        else:
            engine.decrypt()

        result = engine.get_result()
        logger.info(
            "%s %s: %d chars in, %d chars out",
            cipher_type.value,
            direction.value,
            len(message),
            len(result),
        )

        return CipherOutcome(
            result=result,
            cipher_type=cipher_type,
            direction=direction,
            key_used=engine.key_repr(),
            explanation=engine.explain(message, result),
        )

    def encrypt(self, cipher_type: CipherType, plaintext: str, key: Any = None) -> CipherOutcome:
        """Encrypt plaintext with the given cipher."""
        return self.run(cipher_type, plaintext, Direction.ENCRYPT, key)

    def decrypt(self, cipher_type: CipherType, ciphertext: str, key: Any = None) -> CipherOutcome:
        """Decrypt ciphertext with the given cipher."""
        return self.run(cipher_type, ciphertext, Direction.DECRYPT, key)
