from fastapi import APIRouter
from ..models.response import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/api", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse()
