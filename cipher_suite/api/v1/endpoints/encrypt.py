from fastapi import APIRouter, HTTPException, status

from cipher_suite.core.exceptions import EngineNotFoundError, ValidationError
from cipher_suite.core.logging_config import LoggingConfig
from cipher_suite.dependencies import CipherServiceDep
from cipher_suite.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse

router = APIRouter()
logger = LoggingConfig.get_logger(__name__)


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type. A key is generated for keyed ciphers when none is given.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    service: CipherServiceDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Non-letters pass through unchanged; the key actually used is echoed
    back so the ciphertext can be decrypted later.
    """
    try:
        outcome = service.encrypt(request.cipher_type, request.plaintext, request.key)

        return EncryptResponse(
            ciphertext=outcome.result,
            cipher_type=outcome.cipher_type,
            key_used=outcome.key_used,
            explanation=outcome.explanation,
        )

    except ValidationError as e:
        logger.warning("Rejected encrypt request: %s", e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except Exception as e:
        logger.exception("Encryption failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Encryption failed: {str(e)}",
        )
