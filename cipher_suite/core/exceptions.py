from typing import Any


class CipherSuiteError(Exception):
    """Base exception for all cipher suite errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherSuiteError):
    """Raised when an input breaks a cipher's preconditions."""

    pass


class MessageTooLongError(ValidationError):
    """Raised when a message exceeds the configured maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Message length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InvalidKeyError(ValidationError):
    """Raised when a key is missing, empty or cannot be parsed."""

    pass


class MalformedCiphertextError(ValidationError):
    """Raised when ciphertext cannot be decoded by the selected cipher."""

    def __init__(self, message: str, position: int, fragment: str):
        super().__init__(message, {"position": position, "fragment": fragment})


class EngineError(CipherSuiteError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
