import logging

from fastapi import APIRouter, HTTPException, status

from cipherlab.core.exceptions import CipherError
from cipherlab.dependencies import SettingsDep
from cipherlab.models.schemas import (
    DecryptRequest,
    DecryptResponse,
    ErrorDetail,
    ErrorResponse,
)
from cipherlab.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key or text"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        500: {"model": ErrorResponse, "description": "Decryption failed"},
    },
    summary="Decrypt ciphertext",
    description=(
        "Decrypt ciphertext with a given cipher type and key. "
        "The route cipher also needs the open text as a length reference."
    ),
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a specified cipher type and key.

    Decryption is strict: the ciphertext is not normalized, so lowercase
    letters, spaces, digits or punctuation are rejected by the engine.
    """
    # Validate text lengths
    texts = {"ciphertext": request.ciphertext, "open_text": request.open_text}
    for field_name, text in texts.items():
        if text is not None and len(text) > settings.max_text_length:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=ErrorDetail(
                    message=f"{field_name} exceeds maximum length of {settings.max_text_length}",
                    details={"field": field_name, "length": len(text)},
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
        engine = registry.create_engine(request.cipher_type, request.key, request.ciphertext)
        plaintext = engine.decode(request.ciphertext, request.open_text)

        logger.info(
            "Decrypted %d characters with %s",
            len(request.ciphertext),
            request.cipher_type.value,
        )

        return DecryptResponse(
            plaintext=plaintext,
            cipher_type=request.cipher_type,
            key_used=request.key,
            explanation=engine.explain(),
        )

    except CipherError as e:
        logger.warning("Rejected %s decryption: %s", request.cipher_type.value, e.message)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=ErrorDetail(message=e.message, details=e.details).model_dump(),
        )
    except Exception as e:
        logger.exception("Decryption with %s failed", request.cipher_type.value)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ErrorDetail(message=f"Decryption failed: {str(e)}").model_dump(),
        )
