from fastapi import APIRouter
from app.api.v1.endpoints import auth, roles, balance, invoices, settlements

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["authentication"])
api_router.include_router(roles.router, prefix="/roles", tags=["roles"])
api_router.include_router(balance.router, prefix="/balance", tags=["balance"])
api_router.include_router(invoices.router, prefix="/invoices", tags=["invoices"])
api_router.include_router(settlements.router, prefix="/invoices", tags=["settlements"])
