"""
GiftGuard API - Main Application
FastAPI application for gifticon field extraction

Run with: python main.py
Access API docs at: http://localhost:8000/docs
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from giftguard import __version__
from giftguard.api.models import HealthResponse
from giftguard.api.routes import router
from giftguard.config import load_config
from giftguard.utils import setup_logging

# Create FastAPI app
app = FastAPI(
    title="GiftGuard API",
    description="Recover item, merchant, expiry date and code from gifticon images",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(router, prefix="/api/v1")


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": "GiftGuard API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health"
    }


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    return HealthResponse(status="healthy", service="giftguard-api", version=__version__)


if __name__ == "__main__":
    import uvicorn

    config = load_config()
    log_config = config.get('logging', {})
    setup_logging(log_config.get('file', 'logs/giftguard.log'), log_config.get('level', 'INFO'))

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
