"""
Deployment profile information.

Reports which profile (``dev`` or ``prod``) the running instance was
configured with, so operators can tell environments apart.
"""

from ..core.config import settings

PROFILE_MESSAGES = {
    "dev": "You are in the Development Environment!",
    "prod": "You are in the Production Environment. Be careful!",
}


class EnvironmentService:
    """Service returning the message for the active profile."""

    @classmethod
    async def get_environment_message(cls) -> str:
        profile = settings.app_profile.lower()
        return PROFILE_MESSAGES.get(profile, f"You are in the '{profile}' environment.")
