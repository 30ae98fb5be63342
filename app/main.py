from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.core.config import settings
from app.core.logging_config import configure_logging
from app.db.session import get_ledger
from app.db.store import open_ledger, close_ledger
from app.api.v1.api import api_router
from app.services.ledger_service import Ledger


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    await open_ledger()
    yield
    await close_ledger()

app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.DESCRIPTION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/")
async def root():
    return {"message": "Welcome to Host Ledger API"}

@app.get("/health")
async def health(ledger: Ledger = Depends(get_ledger)):
    return {"status": "ok", "invoices": ledger.invoice_count()}

app.include_router(api_router, prefix=settings.API_V1_STR)
