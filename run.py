"""Entry point for running the Education Management API.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables (defaults ``0.0.0.0`` and ``8000``).  Database location,
profile and log level are configured through the variables documented
in ``education_api/app/core/config.py``.

Usage:
    python run.py
"""
import os

import uvicorn

from education_api.app.core.config import settings


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(
        "education_api.app.main:app",
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
