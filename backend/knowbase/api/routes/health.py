from fastapi import APIRouter, Depends

from ...config import Settings
from ...deps import get_settings
from ...schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(settings: Settings = Depends(get_settings)):
    return HealthResponse(status="OK", service=settings.service_name)
