"""
Information endpoint for API v1.

Returns a plain-text message naming the deployment profile the service
runs under (see ``APP_PROFILE`` in ``core.config``).
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from education_api.app.services.environment_service import EnvironmentService

router = APIRouter()


@router.get("/environment", response_class=PlainTextResponse)
async def get_environment() -> str:
    return await EnvironmentService.get_environment_message()
