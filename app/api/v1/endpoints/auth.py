from fastapi import APIRouter, HTTPException, status
from app.core.auth import create_access_token
from app.core.config import settings
from app.schemas.auth import TokenRequest, TokenResponse

router = APIRouter()


@router.post("/token", response_model=TokenResponse)
async def issue_token(token_request: TokenRequest):
    """Issue a bearer token for an identity (development only)"""
    if settings.ENVIRONMENT == "production":
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Not Found"
        )
    return TokenResponse(access_token=create_access_token(token_request.identity))
