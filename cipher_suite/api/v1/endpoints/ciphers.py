from fastapi import APIRouter

from cipher_suite.models.schemas import CipherListResponse
from cipher_suite.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=CipherListResponse,
    summary="List ciphers",
    description="List every available cipher and whether it needs a key.",
)
async def list_ciphers() -> CipherListResponse:
    registry = EngineRegistry()
    ciphers = registry.describe_all()
    return CipherListResponse(ciphers=ciphers, total=len(ciphers))
