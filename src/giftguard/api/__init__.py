"""
API Package
Contains FastAPI routes and models
"""

from giftguard.api.routes import router
from giftguard.api.models import (
    ExtractionResponse,
    ScanResponse,
    GifticonListResponse,
    HealthResponse
)

__all__ = [
    'router',
    'ExtractionResponse',
    'ScanResponse',
    'GifticonListResponse',
    'HealthResponse'
]
