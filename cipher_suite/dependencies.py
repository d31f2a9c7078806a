from typing import Annotated

from fastapi import Depends

from cipher_suite.core.config import Settings, get_settings
from cipher_suite.services.cipher_service import CipherService


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


# Cipher service dependency
def get_cipher_service(settings: SettingsDep) -> CipherService:
    """Get a cipher service bound to the current settings."""
    return CipherService(settings=settings)

CipherServiceDep = Annotated[CipherService, Depends(get_cipher_service)]
