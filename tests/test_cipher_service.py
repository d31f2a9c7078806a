"""Tests for the cipher service."""

import pytest

from cipher_suite.core.config import Settings
from cipher_suite.core.exceptions import (
    EngineNotFoundError,
    InvalidKeyError,
    MalformedCiphertextError,
    MessageTooLongError,
)
from cipher_suite.models.schemas import CipherType, Direction
from cipher_suite.services.cipher_service import CipherService
from cipher_suite.services.engines.base import ConfigurableCipher
from cipher_suite.services.engines.registry import EngineRegistry


class TestCipherService:
    """Test suite for the cipher service."""

    @pytest.fixture
    def service(self):
        return CipherService(settings=Settings(max_message_length=50))

    def test_encrypt_caesar(self, service):
        outcome = service.encrypt(CipherType.CAESAR, "Hello, World!", 3)

        assert outcome.result == "Khoor, Zruog!"
        assert outcome.key_used == "3"
        assert outcome.direction == Direction.ENCRYPT
        assert "shift of 3" in outcome.explanation

    def test_decrypt_vigenere(self, service):
        outcome = service.decrypt(CipherType.VIGENERE, "lyslhj", "key")

        assert outcome.result == "attack"
        assert outcome.key_used == "key"

    def test_key_is_normalized_in_outcome(self, service):
        outcome = service.run(CipherType.CAESAR, "abc", Direction.ENCRYPT, "-1")

        assert outcome.result == "zab"
        assert outcome.key_used == "25"

    def test_keyless_ciphers_ignore_key(self, service):
        outcome = service.encrypt(CipherType.ATBASH, "Hello", "ignored")

        assert outcome.result == "Svool"
        assert outcome.key_used is None

    def test_a1z26(self, service):
        assert service.encrypt(CipherType.A1Z26, "az").result == "0126"
        assert service.decrypt(CipherType.A1Z26, "0126").result == "az"

    def test_encrypt_generates_missing_key(self, service):
        outcome = service.encrypt(CipherType.VIGENERE, "attack at dawn")

        assert outcome.key_used is not None
        assert service.decrypt(CipherType.VIGENERE, outcome.result, outcome.key_used).result == "attack at dawn"

    def test_decrypt_requires_key(self, service):
        with pytest.raises(InvalidKeyError):
            service.decrypt(CipherType.CAESAR, "Khoor")

    def test_empty_vigenere_key(self, service):
        with pytest.raises(InvalidKeyError):
            service.encrypt(CipherType.VIGENERE, "attack", "")

    def test_malformed_a1z26(self, service):
        with pytest.raises(MalformedCiphertextError):
            service.decrypt(CipherType.A1Z26, "123")

    def test_message_too_long(self, service):
        with pytest.raises(MessageTooLongError) as exc_info:
            service.encrypt(CipherType.ATBASH, "x" * 51)
        assert exc_info.value.details == {"length": 51, "max_length": 50}

    def test_unknown_cipher(self, service):
        with pytest.raises(EngineNotFoundError):
            service.encrypt("enigma", "hello")


class RecordingRegistry(EngineRegistry):
    """Registry that remembers which engines it handed out."""

    def __init__(self):
        self.created = []

    def create_engine(self, cipher_type):
        engine = super().create_engine(cipher_type)
        self.created.append(engine)
        return engine


class TestServiceEngineCreation:
    """The service obtains engines through the registry's protocol-typed factory."""

    def test_uses_create_engine(self):
        registry = RecordingRegistry()
        service = CipherService(registry=registry, settings=Settings())

        service.encrypt(CipherType.ATBASH, "abc")
        service.encrypt(CipherType.ATBASH, "abc")

        assert len(registry.created) == 2
        assert registry.created[0] is not registry.created[1]
        assert all(isinstance(engine, ConfigurableCipher) for engine in registry.created)

    def test_empty_message(self):
        outcome = CipherService(settings=Settings()).encrypt(CipherType.CAESAR, "", 5)

        assert outcome.result == ""
