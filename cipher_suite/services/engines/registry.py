from typing import Type

from cipher_suite.core.exceptions import EngineNotFoundError
from cipher_suite.models.schemas import CipherFamily, CipherInfo, CipherType
from cipher_suite.services.engines.base import CipherEngine, ConfigurableCipher


class EngineRegistry:
    """
    Registry for cipher engines.

    Manages available cipher engine classes. Engines hold per-call state,
    so every lookup hands out a fresh instance.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class CaesarEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine_class(self, cipher_type: CipherType) -> Type[CipherEngine]:
        """
        Get the registered class for a cipher type.

        Raises:
            EngineNotFoundError: If the type is not registered
        """
        if cipher_type not in self._engines:
            raise EngineNotFoundError(str(getattr(cipher_type, "value", cipher_type)))
        return self._engines[cipher_type]

    def create_engine(self, cipher_type: CipherType) -> ConfigurableCipher:
        """
        Create a new engine instance for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            A fresh, unconfigured engine
        """
        return self.get_engine_class(cipher_type)()

    def get_engines_by_family(self, family: CipherFamily) -> list[Type[CipherEngine]]:
        """
        Get all engine classes belonging to a cipher family.

        Args:
            family: The cipher family

        Returns:
            List of engine classes
        """
        return [
            engine_class
            for engine_class in self._engines.values()
            if engine_class.cipher_family == family
        ]

    def describe_all(self) -> list[CipherInfo]:
        """Describe every registered engine, in registration order."""
        return [
            CipherInfo(
                cipher_type=engine_class.cipher_type,
                name=engine_class.name,
                family=engine_class.cipher_family,
                description=engine_class.description,
                requires_key=engine_class.requires_key,
            )
            for engine_class in self._engines.values()
        ]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types
        """
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """
        Check if a cipher type is registered.

        Args:
            cipher_type: The cipher type to check

        Returns:
            True if registered
        """
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cipher_suite.services.engines import encoding, monoalphabetic, polyalphabetic  # noqa: F401


# Load engines when module is imported
_load_engines()
