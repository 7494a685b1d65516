import logging

from fastapi import APIRouter, HTTPException, status

from cipherlab.core.exceptions import CipherError
from cipherlab.dependencies import SettingsDep
from cipherlab.models.schemas import (
    EncryptRequest,
    EncryptResponse,
    ErrorDetail,
    ErrorResponse,
)
from cipherlab.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or text"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Encryption failed"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext with a given cipher type and key.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type and key.

    The text is passed to the engine untouched: each engine applies its
    own filtering and validation rules.
    """
    # Validate plaintext length
    if len(request.plaintext) > settings.max_text_length:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorDetail(
                message=f"Plaintext exceeds maximum length of {settings.max_text_length}",
                details={"length": len(request.plaintext)},
            ).model_dump(),
        )

    registry = EngineRegistry()
    if not registry.is_registered(request.cipher_type):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ErrorDetail(
                message=f"Cipher type '{request.cipher_type.value}' is not supported",
            ).model_dump(),
        )

    try:
        engine = registry.create_engine(request.cipher_type, request.key, request.plaintext)
        ciphertext = engine.encode(request.plaintext)

        logger.info(
            "Encrypted %d characters with %s",
            len(request.plaintext),
            request.cipher_type.value,
        )

        return EncryptResponse(
            ciphertext=ciphertext,
            cipher_type=request.cipher_type,
            key_used=request.key,
            explanation=engine.explain(),
        )

    except CipherError as e:
        logger.warning("Rejected %s encryption: %s", request.cipher_type.value, e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorDetail(message=e.message, details=e.details).model_dump(),
        )
    except Exception as e:
        logger.exception("Encryption with %s failed", request.cipher_type.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ErrorDetail(message=f"Encryption failed: {str(e)}").model_dump(),
        )
