from typing import Type

from cipherlab.models.schemas import CipherType
from cipherlab.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Engines hold their key, so the registry stores classes and builds a
    fresh instance per call instead of caching instances.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class RouteCipher(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine_class(self, cipher_type: CipherType) -> Type[CipherEngine] | None:
        """
        Get the engine class for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Engine class or None if not found
        """
        return self._engines.get(cipher_type)

    def create_engine(
        self,
        cipher_type: CipherType,
        key: str | int,
        text: str,
    ) -> CipherEngine | None:
        """
        Build an engine for the specified cipher type.

        Args:
            cipher_type: The type of cipher
            key: Raw key for the engine
            text: Text the engine will process

        Returns:
            Engine instance or None if the type is not registered

        Raises:
            CipherError: If the key is invalid
        """
        engine_class = self.get_engine_class(cipher_type)
        if engine_class is None:
            return None
        return engine_class.from_key(key, text)

    def get_all_engine_classes(self) -> list[Type[CipherEngine]]:
        """
        Get all registered engine classes.

        Returns:
            List of engine classes in registration order
        """
        return list(self._engines.values())

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
    from cipherlab.services.engines import route, substitution  # noqa: F401


# Load engines when module is imported
_load_engines()
