"""Health check routes"""

from datetime import datetime, timezone
from fastapi import APIRouter
import logging

router = APIRouter(tags=["Health"])
logger = logging.getLogger("menugen.api.health")


@router.get("/health")
def health_check():
    """Basic health check endpoint"""
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
