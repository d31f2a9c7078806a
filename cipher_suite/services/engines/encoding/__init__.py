"""Letter-to-number encoding engines."""

from cipher_suite.services.engines.encoding.a1z26 import A1Z26Engine

__all__ = [
    "A1Z26Engine",
]
