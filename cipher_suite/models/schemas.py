from enum import Enum

from pydantic import BaseModel


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    ENCODING = "encoding"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    VIGENERE = "vigenere"
    A1Z26 = "a1z26"
    ATBASH = "atbash"


class Direction(str, Enum):
    """Which way a cipher is run."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key: int | str | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key: int | str | None = None


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: str | None
    explanation: str


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key_used: str | None
    explanation: str


class CipherInfo(BaseModel):
    """Description of one registered cipher."""

    cipher_type: CipherType
    name: str
    family: CipherFamily
    description: str
    requires_key: bool


class CipherListResponse(BaseModel):
    """Response schema for /ciphers endpoint."""

    ciphers: list[CipherInfo]
    total: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
