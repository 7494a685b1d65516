from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherType(str, Enum):
    """Supported cipher types."""

    SUBSTITUTION = "substitution"
    ROUTE = "route"


# ============================================================================
# Cipher Catalogue Schemas
# ============================================================================


class CipherInfo(BaseModel):
    """Description of a registered cipher engine."""

    cipher_type: CipherType
    name: str
    description: str
    key_format: str


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(max_length=100_000)
    cipher_type: CipherType
    key: str | int


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(max_length=100_000)
    cipher_type: CipherType
    key: str | int
    open_text: str | None = Field(
        default=None,
        max_length=100_000,
        description="Open text used as a length reference by the route cipher",
    )


# ============================================================================
# Response Schemas
# ============================================================================


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: str | int
    explanation: str


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    cipher_type: CipherType
    key_used: str | int
    explanation: str


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Error message with the offending values, if any."""

    message: str
    details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
    """Standard error response, as produced by HTTPException."""

    detail: ErrorDetail
