from __future__ import annotations

import uvicorn

from api.infrastructure.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "api.interfaces.api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )
