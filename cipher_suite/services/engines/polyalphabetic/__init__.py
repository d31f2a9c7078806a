"""Polyalphabetic cipher engines."""

from cipher_suite.services.engines.polyalphabetic.vigenere import VigenereEngine, VigenereKey

__all__ = [
    "VigenereEngine",
    "VigenereKey",
]
