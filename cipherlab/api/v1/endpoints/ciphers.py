from fastapi import APIRouter

from cipherlab.models.schemas import CipherInfo
from cipherlab.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the registered cipher engines and the key each one expects.",
)
async def list_ciphers() -> list[CipherInfo]:
    registry = EngineRegistry()
    return [
        CipherInfo(
            cipher_type=engine_class.cipher_type,
            name=engine_class.name,
            description=engine_class.description,
            key_format=engine_class.key_format,
        )
        for engine_class in registry.get_all_engine_classes()
    ]
