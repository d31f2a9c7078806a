from fastapi import APIRouter, HTTPException, status

from cipher_suite.core.exceptions import EngineNotFoundError, ValidationError
from cipher_suite.core.logging_config import LoggingConfig
from cipher_suite.dependencies import CipherServiceDep
from cipher_suite.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse

router = APIRouter()
logger = LoggingConfig.get_logger(__name__)


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input or key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    service: CipherServiceDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a specified cipher type.

    Keyed ciphers (Caesar, Vigenère) need the key; there is no key search.
    """
    try:
        outcome = service.decrypt(request.cipher_type, request.ciphertext, request.key)

        return DecryptResponse(
            plaintext=outcome.result,
            cipher_type=outcome.cipher_type,
            key_used=outcome.key_used,
            explanation=outcome.explanation,
        )

    except ValidationError as e:
        logger.warning("Rejected decrypt request: %s", e.message)
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
        logger.exception("Decryption failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Decryption failed: {str(e)}",
        )
