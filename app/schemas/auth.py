from pydantic import BaseModel, Field


class TokenRequest(BaseModel):
    """Schema for requesting a development token"""
    identity: str = Field(..., min_length=1, max_length=256)


class TokenResponse(BaseModel):
    """Schema for authentication token response"""
    access_token: str
    token_type: str = "bearer"
