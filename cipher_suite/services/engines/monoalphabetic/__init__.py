"""Monoalphabetic cipher engines."""

from cipher_suite.services.engines.monoalphabetic.caesar import CaesarEngine, CaesarKey
from cipher_suite.services.engines.monoalphabetic.atbash import AtbashEngine

__all__ = [
    "CaesarEngine",
    "CaesarKey",
    "AtbashEngine",
]
